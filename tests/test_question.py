import pytest

from dnsget.dns_types import DnsClass, DnsError, RecordType
from dnsget.question import Question


def test_serialize_entry():
    entry = Question(["adamchalmers", "com", ""], RecordType.A, DnsClass.IN)
    encoded = entry.serialize()
    expected_len = len("adamchalmers") + 1 + len("com") + 1 + 1 + 2 + 2
    assert len(encoded) == expected_len
    assert encoded == b"\x0cadamchalmers\x03com\x00\x00\x01\x00\x01"


def test_round_trip():
    entry = Question(["blog", "adamchalmers", "com", ""], RecordType.MX)
    encoded = entry.serialize()
    decoded, offset = Question.deserialize(encoded, 0)
    assert decoded == entry
    assert offset == len(encoded)


def test_deserialize_from_response():
    data = bytes(
        [
            0, 33, 128, 130, 0, 1, 0, 0, 0, 0, 0, 0, 4, 98, 108, 111, 103, 12, 97, 100, 97, 109,
            99, 104, 97, 108, 109, 101, 114, 115, 3, 99, 111, 109, 0, 0, 1, 0, 1,
        ]
    )
    question, offset = Question.deserialize(data, 12)
    assert question.labels == ["blog", "adamchalmers", "com", ""]
    assert question.record_type is RecordType.A
    assert question.record_class is DnsClass.IN
    assert offset == len(data)


def test_display():
    entry = Question(["adamchalmers", "com", ""], RecordType.AAAA)
    assert str(entry) == "AAAA: adamchalmers.com."


def test_label_too_long():
    entry = Question(["a" * 64, ""], RecordType.A)
    with pytest.raises(DnsError, match="is too long"):
        entry.serialize()


def test_deserialize_bad_type():
    with pytest.raises(DnsError, match="Invalid record type number"):
        Question.deserialize(b"\x03com\x00\x00\x03\x00\x01", 0)


def test_deserialize_truncated():
    with pytest.raises(DnsError):
        Question.deserialize(b"\x03com\x00\x00", 0)