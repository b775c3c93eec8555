from __future__ import annotations

import logging
from typing import List, Sequence

from ..common.validators import require_present
from .model import Shift

logger = logging.getLogger(__name__)


class ShiftFactory:
    """Factory Pattern: batch-create shifts from time labels."""

    @staticmethod
    def create(times: Sequence[str]) -> List[Shift]:
        require_present(times, "times")
        shifts = [Shift(time=time) for time in times]
        logger.debug("Created %d shift(s)", len(shifts))
        return shifts
