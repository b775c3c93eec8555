from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import LABEL_SEPARATOR
from ..core.exceptions import NotSignedUpError, ShiftNotOfferedError
from ..jobs.model import Job
from ..shifts.model import Shift

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Volunteer:
    """Domain entity: a person who signs up for one job and some of its shifts.

    Only ``sign_up`` changes ``job``/``shifts``; a second call replaces the first
    assignment entirely.
    """

    name: str
    job: Optional[Job] = field(default=None, init=False)
    shifts: List[Shift] = field(default_factory=list, init=False)

    @property
    def is_signed_up(self) -> bool:
        return self.job is not None

    def sign_up(self, *, job: Job, shifts: Sequence[Shift]) -> None:
        """Assign ``job`` and ``shifts``, replacing any previous sign-up.

        Every shift must be offered by the job. Membership uses ``Shift``
        equality, so a separately built shift with the same label is accepted.
        Otherwise ShiftNotOfferedError is raised and the old assignment stays.
        """
        not_offered = [s for s in shifts if not job.offers(s)]
        if not_offered:
            raise ShiftNotOfferedError(job.name, not_offered)

        self.job = job
        self.shifts = list(shifts)
        logger.info("%s signed up for %s (%d shift(s))", self.name, job.name, len(self.shifts))

    def __str__(self) -> str:
        if self.job is None:
            raise NotSignedUpError(f"{self.name} has not signed up for a job")
        labels = LABEL_SEPARATOR.join(str(s) for s in self.shifts)
        return f"{self.name} is signed up for {self.job.name} on {labels}"
