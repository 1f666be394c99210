"""
Field-set validation for remote properties and parameters.
"""

from typing import Iterable, Mapping

from .errors import ValidationError


def validate_fields(
    values: Mapping[str, object],
    required: Iterable[str],
    optional: Iterable[str] = (),
) -> None:
    """
    Check that a mapping has every required field and nothing unknown.

    Args:
        values: Properties or parameters to check
        required: Fields that must be present
        optional: Fields that may be present

    Raises:
        ValidationError: naming the first missing field, otherwise the
            first unexpected field in sorted order
    """
    required = list(required)
    allowed = set(required) | set(optional)

    for name in required:
        if name not in values:
            raise ValidationError(name, "missing required")

    for name in sorted(values):
        if name not in allowed:
            raise ValidationError(name, "invalid")
