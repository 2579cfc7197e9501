"""Parsing of length-prefixed DNS name labels."""

from __future__ import annotations

from dnsget.dns_types import DnsError

MAX_LABEL_BYTES = 63


def parse_label(data: bytes, offset: int = 0) -> tuple[str, int]:
    """Read one length-prefixed label at ``offset``.

    Returns the label text and the offset just past it.
    """
    if offset >= len(data):
        raise DnsError("Unexpected end of input while reading a label length")
    length = data[offset]
    if length > MAX_LABEL_BYTES:
        raise DnsError(f"DNS name labels must be <=63 bytes but this one is {length}")
    start = offset + 1
    end = start + length
    if end > len(data):
        raise DnsError("Unexpected end of input while reading a label")
    try:
        label = data[start:end].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DnsError(f"Label is not valid UTF-8: {exc}") from exc
    return label, end


def parse_labels_then_zero(data: bytes, offset: int = 0) -> tuple[list[str], int]:
    """Read labels up to and including the zero-length terminal label."""
    labels: list[str] = []
    while True:
        label, offset = parse_label(data, offset)
        labels.append(label)
        if not label:
            return labels, offset