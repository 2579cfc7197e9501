"""Whole DNS messages: building queries and parsing responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address

from dnsget.dns_types import DnsClass, DnsError, RecordType
from dnsget.header import HEADER_SIZE, Header
from dnsget.labels import parse_label
from dnsget.question import Question
from dnsget.record import MxData, Record, RecordData, SoaData, SrvData

MAX_UDP_BYTES = 512
MAX_LABEL_BYTES = 63
MAX_NAME_BYTES = 255
MAX_RECURSION_DEPTH = 20
MAX_TTL = 2**31 - 1

_POINTER_HEADER = 0xC0


@dataclass
class Message:
    """A DNS message: header, questions and three sections of records."""

    header: Header
    question: list[Question] = field(default_factory=list)
    answer: list[Record] = field(default_factory=list)
    authority: list[Record] = field(default_factory=list)
    additional: list[Record] = field(default_factory=list)

    @classmethod
    def new_query(cls, query_id: int, domain_name: str, record_type: RecordType) -> Message:
        """Build a recursive query for one name and record type."""
        name_len = len(domain_name.encode("utf-8"))
        if name_len > MAX_NAME_BYTES:
            raise DnsError(
                f"Domain name is {name_len} bytes, which is over the max of {MAX_NAME_BYTES}"
            )
        labels = domain_name.split(".")
        if any(len(label.encode("utf-8")) > MAX_LABEL_BYTES for label in labels):
            raise DnsError(
                f"One of the labels in your domain is over the max of {MAX_LABEL_BYTES} bytes"
            )
        return cls(header=Header.new_query(query_id), question=[Question(labels, record_type)])

    def serialize(self) -> bytes:
        """Encode the header and questions as wire bytes."""
        return self.header.serialize() + b"".join(q.serialize() for q in self.question)

    @classmethod
    def deserialize(cls, data: bytes) -> Message:
        """Parse a complete DNS message from wire bytes."""
        return _MessageParser(bytes(data)).parse_message()


def _read_uint(buf: bytes, offset: int, size: int) -> tuple[int, int]:
    end = offset + size
    if end > len(buf):
        raise DnsError(f"Unexpected end of input while reading {size} bytes")
    return int.from_bytes(buf[offset:end], "big"), end


class _MessageParser:
    """Parses one message; keeps it whole so compression pointers can be followed."""

    def __init__(self, message: bytes) -> None:
        self._message = message

    def parse_message(self) -> Message:
        header = Header.deserialize(self._message)
        offset = HEADER_SIZE
        questions = []
        for _ in range(header.question_count):
            question, offset = Question.deserialize(self._message, offset)
            questions.append(question)
        answer, offset = self._parse_records(offset, header.answer_count)
        authority, offset = self._parse_records(offset, header.name_server_count)
        additional, offset = self._parse_records(offset, header.additional_records_count)
        return Message(header, questions, answer, authority, additional)

    def _parse_records(self, offset: int, count: int) -> tuple[list[Record], int]:
        records = []
        for _ in range(count):
            record, offset = self._parse_record(offset)
            records.append(record)
        return records, offset

    def _parse_name(self, buf: bytes, offset: int, depth: int) -> tuple[str, int]:
        parts: list[str] = []
        while True:
            if offset >= len(buf):
                raise DnsError("Unexpected end of input while reading a name")
            if buf[offset] >= _POINTER_HEADER:
                pointer, offset = _read_uint(buf, offset, 2)
                target = pointer - (_POINTER_HEADER << 8)
                if depth >= MAX_RECURSION_DEPTH:
                    raise DnsError("too many DNS message compression indirections!")
                if target >= len(self._message):
                    raise DnsError(f"Compression pointer {target} is outside the message")
                pointed, _ = self._parse_name(self._message, target, depth + 1)
                parts.append(pointed)
                break
            label, offset = parse_label(buf, offset)
            if not label:
                break
            parts.append(label + ".")
        return "".join(parts), offset

    def _parse_record(self, offset: int) -> tuple[Record, int]:
        msg = self._message
        name, offset = self._parse_name(msg, offset, 0)
        type_code, offset = _read_uint(msg, offset, 2)
        record_type = RecordType.from_code(type_code)
        class_code, offset = _read_uint(msg, offset, 2)
        record_class = DnsClass.from_code(class_code)
        ttl, offset = _read_uint(msg, offset, 4)
        if ttl > MAX_TTL:
            raise DnsError(f"TTL {ttl} is too large")
        rdlength, offset = _read_uint(msg, offset, 2)
        end = offset + rdlength
        if end > len(msg):
            raise DnsError("Unexpected end of input while reading record data")
        data = self._parse_rdata(record_type, msg[offset:end])
        return Record(name, record_class, ttl, record_type, data), end

    def _parse_rdata(self, record_type: RecordType, rdata: bytes) -> RecordData:
        if record_type is RecordType.A:
            if len(rdata) < 4:
                raise DnsError("A record data is shorter than 4 bytes")
            return IPv4Address(rdata[:4])
        if record_type is RecordType.AAAA:
            if len(rdata) < 16:
                raise DnsError("AAAA record data is shorter than 16 bytes")
            return IPv6Address(rdata[:16])
        if record_type in (RecordType.CNAME, RecordType.NS, RecordType.PTR):
            return self._parse_name(rdata, 0, 0)[0]
        if record_type is RecordType.MX:
            preference, offset = _read_uint(rdata, 0, 2)
            exchange, _ = self._parse_name(rdata, offset, 0)
            return MxData(preference, exchange)
        if record_type is RecordType.SRV:
            priority, offset = _read_uint(rdata, 0, 2)
            weight, offset = _read_uint(rdata, offset, 2)
            port, offset = _read_uint(rdata, offset, 2)
            target, _ = self._parse_name(rdata, offset, 0)
            return SrvData(priority, weight, port, target)
        if record_type is RecordType.TXT:
            length, offset = _read_uint(rdata, 0, 1)
            if offset + length > len(rdata):
                raise DnsError("Unexpected end of input while reading TXT data")
            return rdata[offset:offset + length].decode("utf-8", errors="replace")
        if record_type is RecordType.SOA:
            mname, offset = self._parse_name(rdata, 0, 0)
            rname, offset = self._parse_name(rdata, offset, 0)
            serial, offset = _read_uint(rdata, offset, 4)
            refresh, offset = _read_uint(rdata, offset, 4)
            retry, offset = _read_uint(rdata, offset, 4)
            expire, offset = _read_uint(rdata, offset, 4)
            return SoaData(mname, rname, serial, refresh, retry, expire)
        length, offset = _read_uint(rdata, 0, 2)
        if offset + length > len(rdata):
            raise DnsError("Unexpected end of input while reading raw data")
        return bytes(rdata[offset:offset + length])