from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_SHIFT_TIME


@dataclass(frozen=True)
class Shift:
    """Domain entity: a labeled time slot (e.g. "Saturday morning")."""

    time: str = DEFAULT_SHIFT_TIME

    def __str__(self) -> str:
        return f"{self.time}"
