from ipaddress import IPv4Address, IPv6Address

import pytest

from dnsget.dns_types import DnsClass, RecordType
from dnsget.record import MxData, Record, SoaData, SrvData


def _record(record_type, data, ttl=179):
    return Record("example.com.", DnsClass.IN, ttl, record_type, data)


def test_a_record_rendering():
    rec = _record(RecordType.A, IPv4Address("104.19.237.120"))
    assert rec.as_dns_response() == "A: 104.19.237.120 (TTL 179)"


def test_aaaa_record_uses_address_text():
    addr = IPv6Address("2001:db8::1")
    rec = _record(RecordType.AAAA, addr, ttl=60)
    assert rec.as_dns_response() == f"AAAA: {addr} (TTL 60)"


@pytest.mark.parametrize("record_type", [RecordType.CNAME, RecordType.NS, RecordType.PTR])
def test_name_records_render_the_name(record_type):
    rec = _record(record_type, "target.example.com.", ttl=30)
    assert rec.as_dns_response() == f"{record_type.name}: target.example.com. (TTL 30)"


def test_txt_record_renders_text():
    rec = _record(RecordType.TXT, "v=spf1 -all", ttl=5)
    assert rec.as_dns_response() == "TXT: v=spf1 -all (TTL 5)"


def test_mx_record_rendering():
    rec = _record(RecordType.MX, MxData(10, "mail.example.com."), ttl=300)
    assert rec.as_dns_response() == "MX: 10 mail.example.com. (TTL 300)"


def test_srv_record_rendering():
    rec = _record(RecordType.SRV, SrvData(1, 2, 5060, "sip.example.com."), ttl=300)
    assert rec.as_dns_response() == "SRV: 1 2 5060 sip.example.com. (TTL 300)"


def test_soa_record_rendering():
    soa = SoaData("ns.example.com.", "hostmaster.example.com.", 7, 43200, 600, 604800)
    rec = _record(RecordType.SOA, soa, ttl=300)
    assert rec.as_dns_response() == (
        "SOA: ns.example.com. hostmaster.example.com. "
        "(serial 7, refresh 43200, retry 600, expire 604800) (TTL 300)"
    )


def test_raw_record_reports_length():
    rec = _record(RecordType.ALL, b"\x01\x02\x03", ttl=1)
    assert rec.as_dns_response() == "ALL: RAW(3 bytes) (TTL 1)"


def test_records_compare_by_value():
    first = _record(RecordType.A, IPv4Address("10.0.0.1"))
    same = _record(RecordType.A, IPv4Address("10.0.0.1"))
    other = _record(RecordType.A, IPv4Address("10.0.0.2"))
    assert first == same
    assert (first == other) is False