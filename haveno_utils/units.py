"""
Monero unit conversion for Haveno.

Amounts move between three denominations:

    1 XMR       = 1,000,000,000,000 atomic units (piconero)
    1 centinero = 10,000 atomic units (legacy scale)

Atomic units are plain Python ints and never lose precision.  Decimal XMR
amounts are accepted as strings or numbers and converted with integer
arithmetic only.  The reverse direction returns a float, which is exact in
its integer part up to ``FLOAT_EXACT_INTEGER_LIMIT`` whole XMR; use
``format_atomic_units`` when an exact decimal string is required.

All integer division here truncates toward zero, so negative amounts are
the mirror image of positive ones.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from haveno_utils.errors import DivisionByZero, InvalidAmountFormat

log = logging.getLogger("haveno.units")

# Number of decimal places resolvable in atomic units.
XMR_DECIMALS: int = 12

AU_PER_XMR: int = 10 ** XMR_DECIMALS  # 1_000_000_000_000
AU_PER_UNIT: int = AU_PER_XMR

CENTINEROS_AU_MULTIPLIER: int = 10_000
CENTINEROS_MULTIPLIER: int = CENTINEROS_AU_MULTIPLIER

# Whole-XMR magnitude above which a float no longer holds the integer part exactly.
FLOAT_EXACT_INTEGER_LIMIT: int = 2 ** 53

_DECIMAL_RE = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    # int() refuses strings past sys.get_int_max_str_digits()
    try:
        return int(text)
    except ValueError as exc:
        raise InvalidAmountFormat(f"Amount has too many digits ({len(text)})") from exc


# ═══════════════════════════════════════════════════════════════════════
#  Validated input variants
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class DecimalString:
    """A decimal XMR amount with its point removed.

    ``digits`` is an optional sign followed by ASCII digits (integer run and
    fractional run concatenated); ``frac_len`` is the length of the
    fractional run.  ``"-2.50"`` becomes ``DecimalString("-250", 2)``.
    """
    digits: str
    frac_len: int
    _value: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.digits, str) or not _INTEGER_RE.fullmatch(self.digits):
            raise InvalidAmountFormat(f"Invalid digit run: {self.digits!r}")
        if isinstance(self.frac_len, bool) or not isinstance(self.frac_len, int) \
                or self.frac_len < 0:
            raise InvalidAmountFormat(f"Invalid fraction length: {self.frac_len!r}")
        object.__setattr__(self, "_value", _parse_int(self.digits))

    @property
    def value(self) -> int:
        return self._value


@dataclass(frozen=True)
class IntegerAmount:
    """A whole number of atomic units (or centineros)."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidAmountFormat(f"Invalid integer amount: {self.value!r}")


AmountInput = Union[DecimalString, IntegerAmount]


def _invalid(amount: object, what: str) -> InvalidAmountFormat:
    return InvalidAmountFormat(f"Invalid {what}: {amount!r}")


def parse_decimal_amount(amount: object) -> DecimalString:
    """Validate and normalise a decimal XMR amount.

    Accepts ``str``, ``int``, ``float`` and ``Decimal``.  Floats are read
    through their shortest round-trip repr, so ``1e-05`` parses as
    ``0.00001``.  Strings may carry a sign, surrounding whitespace and a
    leading or trailing point, but not an exponent.
    """
    if isinstance(amount, DecimalString):
        return amount
    if isinstance(amount, bool):
        raise _invalid(amount, "XMR amount")
    if isinstance(amount, int):
        try:
            text = str(amount)
        except ValueError as exc:
            raise InvalidAmountFormat("XMR amount has too many digits") from exc
    elif isinstance(amount, float):
        if not math.isfinite(amount):
            raise _invalid(amount, "XMR amount")
        text = format(Decimal(repr(amount)), "f")
    elif isinstance(amount, Decimal):
        if not amount.is_finite():
            raise _invalid(amount, "XMR amount")
        text = format(amount, "f")
    elif isinstance(amount, str):
        text = amount.strip()
    else:
        raise InvalidAmountFormat(
            f"XMR amount must be a string or number, got {type(amount).__name__}"
        )

    m = _DECIMAL_RE.fullmatch(text)
    if m is None:
        raise _invalid(amount, "XMR amount")
    sign, whole, frac = m.group(1), m.group(2), m.group(3) or ""
    if not whole and not frac:
        raise _invalid(amount, "XMR amount")
    return DecimalString(digits=sign + whole + frac, frac_len=len(frac))


def parse_integer_amount(amount: object) -> IntegerAmount:
    """Validate an integer amount given as ``int`` or a signed digit string."""
    if isinstance(amount, IntegerAmount):
        return amount
    if isinstance(amount, bool):
        raise _invalid(amount, "integer amount")
    if isinstance(amount, int):
        return IntegerAmount(amount)
    if isinstance(amount, str):
        text = amount.strip()
        if _INTEGER_RE.fullmatch(text):
            return IntegerAmount(_parse_int(text))
        raise _invalid(amount, "integer amount")
    raise InvalidAmountFormat(
        f"Integer amount must be an int or digit string, got {type(amount).__name__}"
    )


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmountFormat(f"{name} must be an integer, got {value!r}")
    return value


def _div_trunc(a: int, b: int) -> tuple[int, int]:
    """Integer division rounding toward zero; the remainder takes the sign of *a*."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# ═══════════════════════════════════════════════════════════════════════
#  Conversions
# ═══════════════════════════════════════════════════════════════════════


def convert_decimal_to_atomic(amount: str | int | float | Decimal | DecimalString) -> int:
    """Convert a decimal XMR amount to atomic units.

    >>> convert_decimal_to_atomic("1.5")
    1500000000000
    >>> convert_decimal_to_atomic("0.000000000001")
    1

    Digits beyond the 12th decimal place are below atomic-unit resolution
    and are truncated toward zero.
    """
    dec = parse_decimal_amount(amount)
    # multiply before dividing so no digit below the divisor is lost
    atomic, remainder = _div_trunc(dec.value * AU_PER_XMR, 10 ** dec.frac_len)
    if remainder:
        log.debug(
            "Truncated %r to %d atomic units (more than %d decimals)",
            amount, atomic, XMR_DECIMALS,
        )
    return atomic


def convert_atomic_to_decimal(amount: int | str | IntegerAmount) -> float:
    """Convert atomic units to a float XMR amount.

    The whole and fractional parts are converted separately so the float
    error is confined to the fraction while ``|amount|`` stays below
    ``FLOAT_EXACT_INTEGER_LIMIT`` whole XMR.  Amounts past the float range
    come back as a signed infinity.
    """
    value = parse_integer_amount(amount).value
    quotient, remainder = _div_trunc(value, AU_PER_XMR)
    if abs(quotient) > FLOAT_EXACT_INTEGER_LIMIT:
        log.debug(
            "%d-bit atomic amount exceeds exact float range; result is rounded",
            value.bit_length(),
        )
    try:
        whole = float(quotient)
    except OverflowError:
        log.debug("Atomic amount overflows float; returning infinity")
        return math.copysign(math.inf, value)
    return whole + remainder / AU_PER_XMR


def divide_scaled(a: int, b: int) -> float:
    """Divide two integers, keeping two decimal places (truncated).

    >>> divide_scaled(1, 3)
    0.33
    """
    a = _require_int(a, "dividend")
    b = _require_int(b, "divisor")
    if b == 0:
        raise DivisionByZero(f"Cannot divide {a} by zero")
    scaled, _ = _div_trunc(a * 100, b)
    try:
        return scaled / 100
    except OverflowError:
        log.debug("Scaled quotient of %d-bit operands overflows float; returning infinity",
                  max(a.bit_length(), b.bit_length()))
        return math.copysign(math.inf, scaled)


def convert_centineros_to_atomic(centineros: int | str | float) -> int:
    """Convert a legacy centineros amount to atomic units."""
    if isinstance(centineros, float):
        if not math.isfinite(centineros) or not centineros.is_integer():
            raise _invalid(centineros, "centineros amount")
        return int(centineros) * CENTINEROS_AU_MULTIPLIER
    return parse_integer_amount(centineros).value * CENTINEROS_AU_MULTIPLIER


def convert_atomic_to_centineros(amount: int | str) -> int:
    """Convert atomic units to centineros, dropping sub-centinero dust."""
    value = parse_integer_amount(amount).value
    return _div_trunc(value, CENTINEROS_AU_MULTIPLIER)[0]


def format_atomic_units(amount: int | str, decimals: int = XMR_DECIMALS) -> str:
    """Render atomic units as an exact XMR decimal string.

    The fraction is truncated to *decimals* places (0-12).

    >>> format_atomic_units(1_500_000_000_000, 4)
    '1.5000'
    """
    value = parse_integer_amount(amount).value
    if isinstance(decimals, bool) or not isinstance(decimals, int) \
            or not 0 <= decimals <= XMR_DECIMALS:
        raise ValueError(f"decimals must be an integer in 0..{XMR_DECIMALS}")
    whole, frac = divmod(abs(value), AU_PER_XMR)
    frac_str = f"{frac:0{XMR_DECIMALS}d}"[:decimals]
    sign = "-" if value < 0 and (whole or frac_str.strip("0")) else ""
    if decimals == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{frac_str}"
