"""20-byte network addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

ADDRESS_LENGTH = 20

_HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")


class AddressError(ValueError):
    """Base class for address parsing errors."""


class InvalidHexError(AddressError):
    """The text is not valid hexadecimal."""

    def __init__(self) -> None:
        super().__init__("invalid hex encoding")


class InvalidLengthError(AddressError):
    """The decoded address does not have 20 bytes."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"invalid address length: expected {ADDRESS_LENGTH} bytes, got {length}"
        )
        self.length = length


@dataclass(frozen=True)
class Address:
    """A 20-byte network address; the all-zero address is the burn address."""

    data: bytes

    ZERO: ClassVar["Address"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != ADDRESS_LENGTH:
            raise InvalidLengthError(len(self.data))

    @classmethod
    def from_bytes(cls, data: bytes) -> Address:
        """Create an address from exactly 20 raw bytes."""
        return cls(data)

    def to_hex(self) -> str:
        """Return the address as ``0x``-prefixed lower-case hex."""
        return "0x" + self.data.hex()

    @classmethod
    def from_hex(cls, s: str) -> Address:
        """Parse hex text, with or without a ``0x`` prefix."""
        text = s[2:] if s.startswith("0x") else s
        if not _HEX.fullmatch(text):
            raise InvalidHexError()
        return cls(bytes.fromhex(text))

    def is_zero(self) -> bool:
        """Return True for the zero (burn) address."""
        return not any(self.data)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"Address({self.to_hex()})"


Address.ZERO = Address(bytes(ADDRESS_LENGTH))