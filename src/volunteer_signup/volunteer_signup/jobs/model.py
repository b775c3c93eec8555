from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.constants import BANNER_RULE, LABEL_SEPARATOR
from ..shifts.model import Shift


@dataclass(frozen=True, eq=False)
class Job:
    """Domain entity: a named role offering a list of shifts.

    The shift sequence is shared with whoever built the job, never copied.
    """

    name: str
    shifts: Sequence[Shift]

    def offers(self, shift: Shift) -> bool:
        return shift in self.shifts

    def __str__(self) -> str:
        labels = LABEL_SEPARATOR.join(str(s) for s in self.shifts)
        return f"\n{BANNER_RULE}\n {self.name} \n{BANNER_RULE}\n Shifts: {labels}"


@dataclass(frozen=True)
class JobSpec:
    """Typed descriptor accepted by JobFactory next to plain mappings."""

    name: str
    shifts: Sequence[Shift]
