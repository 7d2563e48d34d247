"""
Exceptions raised by the quantity layer and the formula modules.

Nothing in the library catches these: a violated dimension or domain is
reported immediately to the caller.
"""

import numpy as np


class SpacefaringError(Exception):
    """Base class for all library errors."""


class DimensionMismatch(SpacefaringError, TypeError):
    """
    Raised when an operation combines incompatible physical dimensions.

    Examples: adding a length to a mass, converting kg to m, or passing a
    velocity to a trigonometric function.
    """


# Alias used by the conversion API
DimensionError = DimensionMismatch


class DomainError(SpacefaringError, ValueError):
    """
    Raised when a formula is evaluated outside its mathematical domain.

    Examples: negative radius, eccentricity >= 1, velocity >= c, or a
    non-positive argument to log/acosh/sqrt.
    """


class UnitParseError(SpacefaringError, ValueError):
    """Raised for an unknown unit symbol or a malformed unit expression."""


def check_domain(condition, message: str):
    """
    Raise DomainError unless `condition` holds (element-wise for arrays).

    Args:
        condition: bool or boolean array
        message: Error message used when the check fails
    """
    if not np.all(condition):
        raise DomainError(message)
