"""Sample usage: build the weekend festival roster and sign one volunteer up."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from .core.constants import DEFAULT_SAMPLE_SIZE, DEFAULT_VOLUNTEER_NAME, DEMO_JOB_NAMES, DEMO_SHIFT_TIMES
from .core.exceptions import ValidationError
from .jobs.factory import JobFactory
from .jobs.model import Job
from .shifts.factory import ShiftFactory
from .shifts.model import Shift
from .volunteers.model import Volunteer


@dataclass(frozen=True)
class DemoResult:
    shifts: List[Shift]
    jobs: List[Job]
    volunteer: Volunteer


def run_demo(
    *,
    rng: Optional[random.Random] = None,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    volunteer_name: str = DEFAULT_VOLUNTEER_NAME,
    echo: Callable[[str], None] = print,
) -> DemoResult:
    if sample_size < 0:
        raise ValidationError(f"sample size must not be negative, got {sample_size}")
    rng = rng or random.Random()

    shifts = ShiftFactory.create(DEMO_SHIFT_TIMES)
    jobs = JobFactory.create([{"name": name, "shifts": shifts} for name in DEMO_JOB_NAMES])

    echo("Here are the available volunteer jobs.")
    for job in jobs:
        echo(str(job))
    echo("")

    # Sampling never asks for more shifts than exist.
    picked = rng.sample(shifts, min(sample_size, len(shifts)))
    volunteer = Volunteer(name=volunteer_name)
    volunteer.sign_up(job=jobs[0], shifts=picked)
    echo(str(volunteer))

    return DemoResult(shifts=shifts, jobs=jobs, volunteer=volunteer)
