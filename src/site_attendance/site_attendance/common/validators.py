from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..core.enums import Role
from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(values: Mapping[str, Any], names: Iterable[str] | None = None) -> None:
    """Raise ValidationError listing every missing or blank field."""
    names = list(values) if names is None else list(names)
    missing = [name for name in names if is_blank(values.get(name))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", fields=missing)


def require_strings(values: Mapping[str, Any], names: Iterable[str] | None = None) -> None:
    """Raise ValidationError listing every given field that is not a string.

    Absent fields are left to ``require_fields``.
    """
    names = list(values) if names is None else list(names)
    wrong = [name for name in names if values.get(name) is not None and not isinstance(values[name], str)]
    if wrong:
        raise ValidationError(f"Fields must be strings: {', '.join(wrong)}", fields=wrong)


def require_role(value: str) -> Role:
    try:
        return Role(value)
    except ValueError:
        raise ValidationError(f"Invalid role: {value!r}", fields=["role"])


def require_list(value: Any, field_name: str, *, allow_empty: bool = True, item_type: Optional[type] = None) -> list:
    if not isinstance(value, list):
        raise ValidationError(f"{field_name} must be a list", fields=[field_name])
    if not allow_empty and not value:
        raise ValidationError(f"{field_name} must not be empty", fields=[field_name])
    if item_type is not None and not all(isinstance(item, item_type) for item in value):
        raise ValidationError(f"{field_name} must only hold {item_type.__name__} values", fields=[field_name])
    return value
