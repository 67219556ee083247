"""
Custom exceptions for Passforge.
"""


class PassforgeException(Exception):
    """Base exception for Passforge."""

    pass


class InvalidOptionsError(PassforgeException):
    """Generation options are malformed."""

    pass


class InvalidLengthError(InvalidOptionsError):
    """Password length is missing, not an integer, or negative."""

    pass


class NoEligibleCategoriesError(InvalidOptionsError):
    """No character category or include set to draw from."""

    pass


class InvalidPatternError(InvalidOptionsError):
    """Pattern mask or include set failed shape checks."""

    pass
