"""Volunteer Sign-up package.

This package is organized by feature modules (shifts, jobs, volunteers) with
the factories next to the models they build and a thin demo driver on top.
"""
from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .core.constants import DEFAULT_SAMPLE_SIZE, DEFAULT_VOLUNTEER_NAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    module: str
    debug: bool
    log_level: str
    demo_seed: Optional[int]
    demo_sample_size: int
    demo_volunteer_name: str


def load_settings() -> Settings:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    return Settings(
        module=settings_module,
        debug=bool(getattr(settings, "DEBUG", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        demo_seed=getattr(settings, "DEMO_SEED", None),
        demo_sample_size=int(getattr(settings, "DEMO_SAMPLE_SIZE", DEFAULT_SAMPLE_SIZE)),
        demo_volunteer_name=str(getattr(settings, "DEMO_VOLUNTEER_NAME", DEFAULT_VOLUNTEER_NAME)),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
