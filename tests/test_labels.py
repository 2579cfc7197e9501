import pytest

from dnsget.dns_types import DnsError
from dnsget.labels import parse_label, parse_labels_then_zero


def test_parse_single_label():
    data = b"\x03com"
    label, offset = parse_label(data, 0)
    assert label == "com"
    assert offset == len(data)


def test_parse_label_at_offset_leaves_rest():
    data = b"xx\x04blogtail"
    label, offset = parse_label(data, 2)
    assert label == "blog"
    assert data[offset:] == b"tail"


def test_empty_label():
    label, offset = parse_label(b"\x00", 0)
    assert label == ""
    assert offset == 1


def test_label_too_long():
    data = bytes([64]) + b"a" * 64
    with pytest.raises(DnsError, match="<=63 bytes but this one is 64"):
        parse_label(data, 0)


def test_label_of_63_bytes_is_allowed():
    data = bytes([63]) + b"a" * 63
    label, offset = parse_label(data, 0)
    assert label == "a" * 63
    assert offset == len(data)


def test_truncated_label():
    with pytest.raises(DnsError):
        parse_label(b"\x05ab", 0)


def test_missing_length_byte():
    with pytest.raises(DnsError):
        parse_label(b"", 0)


def test_invalid_utf8_label():
    with pytest.raises(DnsError):
        parse_label(b"\x02\xff\xfe", 0)


def test_labels_then_zero():
    data = b"\x04blog\x0cadamchalmers\x03com\x00\x00\x01"
    labels, offset = parse_labels_then_zero(data, 0)
    assert labels == ["blog", "adamchalmers", "com", ""]
    assert data[offset:] == b"\x00\x01"


def test_labels_without_terminator_fail():
    with pytest.raises(DnsError):
        parse_labels_then_zero(b"\x03com", 0)