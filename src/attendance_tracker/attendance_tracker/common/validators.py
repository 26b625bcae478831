from __future__ import annotations

from datetime import date, time
from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_hhmm, parse_iso_date

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_date(value, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(require_non_empty(value, field_name))
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def require_time(value, field_name: str) -> time:
    if isinstance(value, time):
        return value
    try:
        return parse_hhmm(require_non_empty(value, field_name))
    except ValueError:
        raise ValidationError(f"{field_name} must be a HH:MM time")


def require_choice(value, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(require_non_empty(value, field_name))
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def require_non_negative_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number
