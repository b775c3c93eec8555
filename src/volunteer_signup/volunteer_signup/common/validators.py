from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.exceptions import MissingFieldError


def require_present(value: Any, field_name: str) -> Any:
    if value is None:
        raise MissingFieldError(field_name)
    return value


def require_field(record: Mapping[str, Any], field_name: str, *, position: Optional[int] = None) -> Any:
    """Strict key lookup: no defaults, absent keys raise MissingFieldError."""
    try:
        return record[field_name]
    except KeyError:
        raise MissingFieldError(field_name, position) from None
