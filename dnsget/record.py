"""Resource records returned in the answer, authority and additional sections."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import Union

from dnsget.dns_types import DnsClass, RecordType


@dataclass(frozen=True)
class MxData:
    """Data of an MX record: a mail exchange and its preference."""

    preference: int
    exchange: str


@dataclass(frozen=True)
class SrvData:
    """Data of an SRV record: where a service is offered."""

    priority: int
    weight: int
    port: int
    target: str


@dataclass(frozen=True)
class SoaData:
    """Data of an SOA record, describing the zone's authority."""

    mname: str
    """Name server that was the original or primary source of data for this zone."""
    rname: str
    """Mailbox of the person responsible for this zone."""
    serial: int
    """Version number of the original copy of the zone."""
    refresh: int
    """Time interval before the zone should be refreshed."""
    retry: int
    """Time interval before a failed refresh should be retried."""
    expire: int
    """Upper limit on the time before the zone is no longer authoritative."""


RecordData = Union[IPv4Address, IPv6Address, str, MxData, SrvData, SoaData, bytes]


@dataclass
class Record:
    """One resource record.

    ``data`` holds an address for A and AAAA, a name for CNAME, NS and PTR,
    text for TXT, the matching data class for MX, SRV and SOA, and raw bytes
    for records of type ALL.
    """

    name: str
    record_class: DnsClass
    ttl: int
    record_type: RecordType
    data: RecordData

    def _rdata_text(self) -> str:
        data = self.data
        if isinstance(data, MxData):
            return f"{data.preference} {data.exchange}"
        if isinstance(data, SrvData):
            return f"{data.priority} {data.weight} {data.port} {data.target}"
        if isinstance(data, SoaData):
            return (
                f"{data.mname} {data.rname} (serial {data.serial}, refresh {data.refresh}, "
                f"retry {data.retry}, expire {data.expire})"
            )
        if isinstance(data, (bytes, bytearray)):
            return f"RAW({len(data)} bytes)"
        return str(data)

    def as_dns_response(self) -> str:
        """Render the record as one line of human-readable output."""
        return f"{self.record_type}: {self._rdata_text()} (TTL {self.ttl})"