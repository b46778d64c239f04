"""Logo name validation.

Names must be non-empty and use only ``[A-Za-z0-9_-]``. Validation is pure:
no file-system access and the input is never modified.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from brandcn.exceptions import LogoNameError
from brandcn.models import NameValidationError, ValidationResult

LOGO_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_-]+")

EMPTY_NAME_MESSAGE = "Logo name cannot be empty"
INVALID_CHARS_MESSAGE = (
    "Logo name must contain only alphanumeric characters, hyphens, or underscores"
)


def parse_logo_name(name: str) -> str:
    """Return ``name`` unchanged if it is a valid logo name.

    Raises:
        LogoNameError: With the first rule the name violates.
    """
    if len(name) == 0:
        raise LogoNameError(EMPTY_NAME_MESSAGE)
    if not LOGO_NAME_PATTERN.fullmatch(name):
        raise LogoNameError(INVALID_CHARS_MESSAGE)
    return name


def validate_logo_names(names: Sequence[str]) -> ValidationResult:
    """Split names into valid ones and errors, preserving input order.

    Duplicates are validated independently; each error is keyed by the
    original string.
    """
    result = ValidationResult()
    for name in names:
        try:
            result.valid_names.append(parse_logo_name(name))
        except LogoNameError as e:
            result.errors.append(NameValidationError(name=name, error=e.message))
    return result
