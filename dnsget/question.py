"""Entries of the question section of a DNS message."""

from __future__ import annotations

from dataclasses import dataclass, field

from dnsget.dns_types import DnsClass, DnsError, RecordType
from dnsget.labels import parse_labels_then_zero

LABEL_TOO_LONG = "is too long (must be <64 chars)"


@dataclass
class Question:
    """A query name, type and class."""

    labels: list[str]
    record_type: RecordType
    record_class: DnsClass = field(default=DnsClass.IN)

    def __str__(self) -> str:
        return f"{self.record_type}: {'.'.join(self.labels)}"

    def serialize(self) -> bytes:
        """Encode the question: its labels, then type and class."""
        return self._serialize_qname() + self.record_type.serialize() + self.record_class.serialize()

    def _serialize_qname(self) -> bytes:
        out = bytearray()
        for label in self.labels:
            if len(label.encode("utf-8")) >= 64:
                raise DnsError(f"Label {label} {LABEL_TOO_LONG}")
            try:
                encoded = label.encode("latin-1")
            except UnicodeEncodeError as exc:
                raise DnsError(f"Label {label} has characters that do not fit in a byte") from exc
            out.append(len(label.encode("utf-8")))
            out += encoded
        return bytes(out)

    @classmethod
    def deserialize(cls, data: bytes, offset: int = 0) -> tuple[Question, int]:
        """Decode a question at ``offset``; return it and the offset after it."""
        labels, offset = parse_labels_then_zero(data, offset)
        if offset + 4 > len(data):
            raise DnsError("Unexpected end of input while reading a question")
        record_type = RecordType.from_code(int.from_bytes(data[offset:offset + 2], "big"))
        record_class = DnsClass.from_code(int.from_bytes(data[offset + 2:offset + 4], "big"))
        return cls(labels, record_type, record_class), offset + 4