"""
Error taxonomy for haveno-utils.

Every error derives from ``HavenoUtilsError`` and from the builtin whose
meaning it refines, so callers can catch either.
"""

from __future__ import annotations


class HavenoUtilsError(Exception):
    """Base class for all haveno-utils errors."""


class InvalidAmountFormat(HavenoUtilsError, ValueError):
    """An amount is not a recognised numeric or string representation."""


class DivisionByZero(HavenoUtilsError, ZeroDivisionError):
    """Divisor of the scaled division helper is zero."""


class FieldNotFound(HavenoUtilsError, LookupError):
    """A payment-account form has no field with the requested id."""

    def __init__(self, field_id: str):
        self.field_id = field_id
        super().__init__(f"PaymentAccountForm does not have field {field_id}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidLogLevel(HavenoUtilsError, ValueError):
    """A log level is not an integer >= 0."""
