"""
Input validation utilities for Passforge.
"""

import re
from typing import Optional

from ..exceptions import InvalidPatternError

MAX_LENGTH = 1024
MAX_PATTERN_LENGTH = 256

# Printable characters only: no control characters or line breaks
PATTERN_RE = re.compile(r"^[^\x00-\x1f\x7f]{1,%d}$" % MAX_PATTERN_LENGTH)


def validate_pattern(pattern: str) -> bool:
    """
    Validate a pattern mask or include set.

    Args:
        pattern: The text to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(pattern, str):
        return False

    return bool(PATTERN_RE.match(pattern))


def get_validation_error_message(pattern: str) -> str:
    """
    Get a descriptive error message for an invalid pattern.

    Args:
        pattern: The invalid pattern

    Returns:
        Error message describing why the pattern is invalid
    """
    if not isinstance(pattern, str):
        return "Pattern must be a string"

    if len(pattern) == 0:
        return "Pattern cannot be empty"

    if len(pattern) > MAX_PATTERN_LENGTH:
        return f"Pattern cannot be longer than {MAX_PATTERN_LENGTH} characters"

    if any(ord(c) < 0x20 or ord(c) == 0x7f for c in pattern):
        return "Pattern contains control characters"

    return "Pattern format is invalid"


def check_pattern(pattern: Optional[str], what: str = "Pattern") -> Optional[str]:
    """
    Validate an optional pattern, raising with a readable message.

    Args:
        pattern: Pattern or include set, None when not given
        what: Name used in the error message

    Returns:
        The pattern unchanged

    Raises:
        InvalidPatternError: If the pattern is given and invalid
    """
    if pattern is None or validate_pattern(pattern):
        return pattern

    message = get_validation_error_message(pattern)
    raise InvalidPatternError(message.replace("Pattern", what, 1))
