"""The fixed 12-byte DNS message header."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dnsget.dns_types import DnsError

HEADER_SIZE = 12


class BitReader:
    """Reads big-endian unsigned fields from bytes, one bit at a time."""

    def __init__(self, data: bytes, position: int = 0) -> None:
        self.data = bytes(data)
        self.position = position

    def take(self, count: int) -> int:
        """Read ``count`` bits, most significant first, as an unsigned integer."""
        end = self.position + count
        if end > len(self.data) * 8:
            raise DnsError(f"Not enough input to read {count} bits")
        value = 0
        for bit_index in range(self.position, end):
            byte = self.data[bit_index // 8]
            value = (value << 1) | ((byte >> (7 - bit_index % 8)) & 1)
        self.position = end
        return value

    def take_bit(self) -> bool:
        """Read one bit as a boolean."""
        return self.take(1) != 0

    def take_nibble(self) -> int:
        """Read four bits."""
        return self.take(4)

    def take_u16(self) -> int:
        """Read sixteen bits."""
        return self.take(16)


class Opcode(Enum):
    """The kind of query a message carries."""

    QUERY = 0
    INVERSE_QUERY = 1
    STATUS = 2

    @classmethod
    def from_code(cls, value: int) -> Opcode:
        try:
            return cls(value)
        except ValueError:
            raise DnsError(f"Unknown opcode {value}") from None


_RESPONSE_DESCRIPTIONS = {
    0: "No error condition",
    1: "The name server was unable to interpret the query",
    2: "The name server was unable to process this query due to a problem with the name server.",
    3: "Domain name referenced in the query does not exist",
    4: "The name server does not support the requested kind of query",
    5: (
        "The name server refuses to perform the specified operation for policy reasons.  "
        "For example, a name server may not wish to provide the information to the "
        "particular requester, or a name server may not wish to perform a particular operation"
    ),
}


class ResponseCode(Enum):
    """The status a resolver reports for a query."""

    NO_ERROR = 0
    FORMAT_ERROR = 1
    SERVER_FAILURE = 2
    NAME_ERROR = 3
    NOT_IMPLEMENTED = 4
    REFUSED = 5

    def __str__(self) -> str:
        return _RESPONSE_DESCRIPTIONS[self.value]

    @classmethod
    def from_code(cls, value: int) -> ResponseCode:
        try:
            return cls(value)
        except ValueError:
            raise DnsError(f"Unknown response code {value}") from None


@dataclass
class Header:
    """The header that starts every DNS query and response."""

    id: int
    is_query: bool
    opcode: Opcode
    authoritative_answer: bool
    truncation: bool
    recursion_desired: bool
    recursion_available: bool
    resp_code: ResponseCode
    question_count: int
    answer_count: int
    name_server_count: int
    additional_records_count: int

    @classmethod
    def new_query(cls, query_id: int) -> Header:
        """Build the header for a recursive query with one question."""
        return cls(
            id=query_id,
            is_query=False,
            opcode=Opcode.QUERY,
            authoritative_answer=False,
            truncation=False,
            recursion_desired=True,
            recursion_available=False,
            resp_code=ResponseCode.NO_ERROR,
            question_count=1,
            answer_count=0,
            name_server_count=0,
            additional_records_count=0,
        )

    def serialize(self) -> bytes:
        """Encode the header as its 12 wire bytes."""
        flags = (
            int(self.is_query) << 15
            | self.opcode.value << 11
            | int(self.authoritative_answer) << 10
            | int(self.truncation) << 9
            | int(self.recursion_desired) << 8
            | int(self.recursion_available) << 7
            | self.resp_code.value
        )
        fields = (
            self.id,
            flags,
            self.question_count,
            self.answer_count,
            self.name_server_count,
            self.additional_records_count,
        )
        encoded = b"".join(field.to_bytes(2, "big") for field in fields)
        assert len(encoded) == HEADER_SIZE
        return encoded

    @classmethod
    def deserialize(cls, data: bytes) -> Header:
        """Decode the header from the first 12 bytes of ``data``."""
        reader = BitReader(data)
        query_id = reader.take_u16()
        qr = reader.take_bit()
        opcode = Opcode.from_code(reader.take_nibble())
        aa = reader.take_bit()
        tc = reader.take_bit()
        rd = reader.take_bit()
        ra = reader.take_bit()
        if reader.take(3) != 0:
            raise DnsError("Reserved header bits must be zero")
        rcode = ResponseCode.from_code(reader.take_nibble())
        return cls(
            id=query_id,
            is_query=qr,
            opcode=opcode,
            authoritative_answer=aa,
            truncation=tc,
            recursion_desired=rd,
            recursion_available=ra,
            resp_code=rcode,
            question_count=reader.take_u16(),
            answer_count=reader.take_u16(),
            name_server_count=reader.take_u16(),
            additional_records_count=reader.take_u16(),
        )