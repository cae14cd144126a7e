"""HCLAW token amounts held in base units, with checked and saturating arithmetic."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

DECIMALS = 18
"""Number of decimal places: 10**18 base units make one HCLAW."""

ONE_HCLAW = 10**DECIMALS
"""One HCLAW expressed in base units."""

MAX_SUPPLY = 1_000_000_000 * ONE_HCLAW
"""Maximum supply (one billion HCLAW); saturating addition caps here."""

U128_MAX = 2**128 - 1
U64_MAX = 2**64 - 1

_DIGITS = re.compile(r"\+?[0-9]+")
_FRACTION_DIGITS = re.compile(r"[0-9]*")


class AmountError(ValueError):
    """Base class for amount parsing and arithmetic errors."""


class InvalidAmountFormatError(AmountError):
    """The text is not a valid decimal amount."""

    def __init__(self) -> None:
        super().__init__("invalid amount format")


class TooManyDecimalsError(AmountError):
    """The text has more fractional digits than the token supports."""

    def __init__(self) -> None:
        super().__init__(f"too many decimal places (max {DECIMALS})")


class AmountOverflowError(AmountError):
    """An amount fell outside the representable range."""

    def __init__(self, message: str = "amount overflow") -> None:
        super().__init__(message)


@dataclass(frozen=True, order=True)
class HclawAmount:
    """A token amount in the smallest unit, limited to an unsigned 128-bit range."""

    raw: int = 0

    ZERO: ClassVar["HclawAmount"]

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int) or isinstance(self.raw, bool):
            raise TypeError("amount must be an integer number of base units")
        if not 0 <= self.raw <= U128_MAX:
            raise ValueError(f"amount out of range: {self.raw}")

    @classmethod
    def from_raw(cls, raw: int) -> HclawAmount:
        """Create an amount from base units."""
        return cls(raw)

    @classmethod
    def from_hclaw(cls, hclaw: int) -> HclawAmount:
        """Create an amount from a whole number of HCLAW."""
        if not 0 <= hclaw <= U64_MAX:
            raise ValueError(f"whole HCLAW value out of range: {hclaw}")
        return cls(hclaw * ONE_HCLAW)

    @classmethod
    def from_decimal_str(cls, s: str) -> HclawAmount:
        """Parse a decimal HCLAW value such as ``"1.5"``."""
        parts = s.split(".")
        if len(parts) > 2:
            raise InvalidAmountFormatError()

        whole_text = parts[0]
        if not _DIGITS.fullmatch(whole_text):
            raise InvalidAmountFormatError()
        whole = int(whole_text)
        if whole > U128_MAX:
            raise InvalidAmountFormatError()

        fractional = 0
        if len(parts) == 2:
            frac_text = parts[1]
            if len(frac_text) > DECIMALS:
                raise TooManyDecimalsError()
            if not _FRACTION_DIGITS.fullmatch(frac_text):
                raise InvalidAmountFormatError()
            fractional = int(frac_text.ljust(DECIMALS, "0"))

        total = whole * ONE_HCLAW + fractional
        if total > U128_MAX:
            raise AmountOverflowError()
        return cls(total)

    def whole_hclaw(self) -> int:
        """Return the whole-HCLAW part, truncated."""
        return self.raw // ONE_HCLAW

    def to_decimal_string(self) -> str:
        """Render as a decimal HCLAW value without trailing zeros."""
        whole, frac = divmod(self.raw, ONE_HCLAW)
        if frac == 0:
            return f"{whole}.0"
        return f"{whole}.{f'{frac:0{DECIMALS}d}'.rstrip('0')}"

    def checked_add(self, other: HclawAmount) -> Optional[HclawAmount]:
        """Add, or return None on overflow."""
        total = self.raw + other.raw
        return HclawAmount(total) if total <= U128_MAX else None

    def checked_sub(self, other: HclawAmount) -> Optional[HclawAmount]:
        """Subtract, or return None if the result would be negative."""
        diff = self.raw - other.raw
        return HclawAmount(diff) if diff >= 0 else None

    def checked_mul(self, factor: int) -> Optional[HclawAmount]:
        """Multiply by an unsigned factor, or return None on overflow."""
        if factor < 0:
            raise ValueError("factor must not be negative")
        product = self.raw * factor
        return HclawAmount(product) if product <= U128_MAX else None

    def checked_div(self, divisor: int) -> Optional[HclawAmount]:
        """Divide by an unsigned divisor, or return None when it is zero."""
        if divisor < 0:
            raise ValueError("divisor must not be negative")
        if divisor == 0:
            return None
        return HclawAmount(self.raw // divisor)

    def percentage(self, percent: int) -> HclawAmount:
        """Return ``percent`` per cent of this amount, rounded down."""
        if not 0 <= percent <= 255:
            raise ValueError(f"percent out of range: {percent}")
        value = self.raw * percent
        if value > U128_MAX:
            raise AmountOverflowError()
        return HclawAmount(value // 100)

    def saturating_add(self, other: HclawAmount) -> HclawAmount:
        """Add, capping the result at MAX_SUPPLY."""
        return HclawAmount(min(self.raw + other.raw, U128_MAX, MAX_SUPPLY))

    def saturating_sub(self, other: HclawAmount) -> HclawAmount:
        """Subtract, flooring the result at zero."""
        return HclawAmount(max(self.raw - other.raw, 0))

    def is_zero(self) -> bool:
        """Return True for the zero amount."""
        return self.raw == 0

    def __add__(self, other: HclawAmount) -> HclawAmount:
        if not isinstance(other, HclawAmount):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise AmountOverflowError()
        return result

    def __sub__(self, other: HclawAmount) -> HclawAmount:
        if not isinstance(other, HclawAmount):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise AmountOverflowError("amount underflow")
        return result

    def __mul__(self, factor: int) -> HclawAmount:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        result = self.checked_mul(factor)
        if result is None:
            raise AmountOverflowError()
        return result

    def __floordiv__(self, divisor: int) -> HclawAmount:
        if not isinstance(divisor, int) or isinstance(divisor, bool):
            return NotImplemented
        result = self.checked_div(divisor)
        if result is None:
            raise ZeroDivisionError("division by zero")
        return result

    def __str__(self) -> str:
        return f"{self.to_decimal_string()} HCLAW"

    def __repr__(self) -> str:
        return f"HclawAmount({self.to_decimal_string()})"


HclawAmount.ZERO = HclawAmount(0)