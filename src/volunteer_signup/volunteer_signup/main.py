from __future__ import annotations

import logging
import random
import sys

from . import configure_logging, load_settings
from .core.exceptions import DomainError
from .demo import run_demo

logger = logging.getLogger(__name__)


def main() -> int:
    settings = load_settings()
    configure_logging(settings)
    logger.debug("settings=%s seed=%s", settings.module, settings.demo_seed)

    try:
        run_demo(
            rng=random.Random(settings.demo_seed),
            sample_size=settings.demo_sample_size,
            volunteer_name=settings.demo_volunteer_name,
        )
    except DomainError as e:
        logger.error(f"Demo failed: {e}", exc_info=settings.debug)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
