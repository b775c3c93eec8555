from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for sign-up rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingFieldError(ValidationError):
    """Raised when a factory input omits a mandatory field."""

    def __init__(self, field: str, position: Optional[int] = None):
        self.field = field
        self.position = position
        where = f" (descriptor #{position})" if position is not None else ""
        super().__init__(f"missing required field '{field}'{where}")


class ShiftNotOfferedError(ValidationError):
    """Raised when a volunteer picks shifts the job does not offer."""

    def __init__(self, job_name: str, shifts: Sequence[object]):
        self.job_name = job_name
        self.shifts = list(shifts)
        labels = ", ".join(str(s) for s in self.shifts)
        super().__init__(f"{job_name} does not offer: {labels}")


class NotSignedUpError(DomainError):
    """Raised when a volunteer's assignment is read before sign-up."""
