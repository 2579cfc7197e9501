"""Record types and classes shared by the DNS message code."""

from __future__ import annotations

from enum import Enum


class DnsError(ValueError):
    """Raised when DNS data cannot be built or parsed."""


class RecordType(Enum):
    """A DNS record type, valued by its wire type number."""

    A = 1
    NS = 2
    CNAME = 5
    SOA = 6
    PTR = 12
    MX = 15
    TXT = 16
    AAAA = 28
    SRV = 33
    ALL = 255

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_str(cls, text: str) -> RecordType:
        """Parse a record type name, ignoring case."""
        upper = text.upper()
        try:
            return cls.__members__[upper]
        except KeyError:
            raise DnsError(f"{upper} is not a valid DNS record type") from None

    @classmethod
    def from_code(cls, value: int) -> RecordType:
        """Look up a record type by its wire type number."""
        try:
            return cls(value)
        except ValueError:
            raise DnsError(f"Invalid record type number {value}") from None

    def serialize(self) -> bytes:
        """Encode the type number as a big-endian 16-bit value."""
        return self.value.to_bytes(2, "big")


class DnsClass(Enum):
    """A DNS record class, valued by its wire class number."""

    IN = 1

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_code(cls, value: int) -> DnsClass:
        """Look up a class by its wire class number."""
        try:
            return cls(value)
        except ValueError:
            raise DnsError(f"Invalid class number {value}") from None

    def serialize(self) -> bytes:
        """Encode the class number as a big-endian 16-bit value."""
        return self.value.to_bytes(2, "big")