"""
Exception types for option valuation.

Every caller-input mistake (non-positive prices, maturities, trial counts,
negative results) is reported as a ValidationError at construction time.
ValidationError subclasses ValueError so callers that already catch
ValueError keep working.
"""

import numbers
from typing import Any


class ValidationError(ValueError):
    """
    Raised when an argument is out of its allowed range.

    Attributes
    ----------
    name : str
        Name of the offending argument
    value : Any
        The rejected value
    """

    def __init__(self, name: str, value: Any, constraint: str):
        self.name = name
        self.value = value
        self.constraint = constraint
        super().__init__(f"CRITICAL: {name} must be {constraint}, got {value}")


def require_positive(name: str, value: float) -> float:
    """Return value unchanged, raising ValidationError unless value > 0."""
    if not value > 0:
        raise ValidationError(name, value, "> 0")
    return value


def require_non_negative(name: str, value: float) -> float:
    """Return value unchanged, raising ValidationError unless value >= 0."""
    # NaN fails both comparisons
    if not value >= 0:
        raise ValidationError(name, value, ">= 0")
    return value


def require_integer(name: str, value: Any) -> int:
    """
    Return value as an int, raising ValidationError unless it is a whole number.

    Integral floats such as 1e4 are accepted; fractional values, booleans and
    non-numbers are rejected rather than truncated.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(name, value, "an integer")
    if not isinstance(value, numbers.Integral) and not float(value).is_integer():
        raise ValidationError(name, value, "an integer")
    return int(value)
