"""Sending a query to a resolver over UDP and printing its response."""

from __future__ import annotations

import socket
import sys
from ipaddress import ip_address

from dnsget.header import ResponseCode
from dnsget.message import MAX_UDP_BYTES, Message

READ_TIMEOUT_SECONDS = 5.0


def _format_address(host: str, port: int) -> str:
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


def send_request(message: Message, resolver: tuple[str, int], verbose: bool = False) -> bytes:
    """Send ``message`` to ``resolver`` and return the raw bytes of its reply.

    ``resolver`` is an ``(ip, port)`` pair.  Raises ``ConnectionError`` when the
    request cannot be sent whole or no reply arrives.
    """
    host, port = resolver
    if ip_address(host).version == 6:
        family, local = socket.AF_INET6, ("::", 0)
    else:
        family, local = socket.AF_INET, ("0.0.0.0", 0)

    with socket.socket(family, socket.SOCK_DGRAM) as sock:
        sock.bind(local)
        sock.settimeout(READ_TIMEOUT_SECONDS)
        if verbose:
            bound_host, bound_port = sock.getsockname()[:2]
            print(f"Bound to local {_format_address(bound_host, bound_port)}")
        sock.connect((host, port))
        if verbose:
            print(f"Connected to remote {_format_address(host, port)}")

        body = message.serialize()
        if verbose:
            print(f"Request size: {len(body)} bytes")
        sent = sock.send(body)
        if sent != len(body):
            raise ConnectionError(f"Only {sent} bytes, message was probably truncated")

        try:
            return sock.recv(MAX_UDP_BYTES)
        except OSError as exc:
            raise ConnectionError(f"recv function failed: {exc!r}") from exc


def print_response(response: bytes, sent_query_id: int, verbose: bool = False) -> None:
    """Parse a resolver's reply and print its questions and records.

    Raises ``DnsError`` when the reply cannot be parsed or reports an error.
    """
    if verbose:
        print(f"Response size: {len(response)} bytes")
        print(f"Raw response bytes: {list(response)}")

    try:
        message = Message.deserialize(response)
    except ValueError as exc:
        from dnsget.dns_types import DnsError

        raise DnsError(f"Parsing error: {exc}") from exc

    if message.header.id != sent_query_id:
        print(
            f"Warning: Mismatched query IDs. Sent {sent_query_id}, received {message.header.id}",
            file=sys.stderr,
        )

    if message.header.resp_code is not ResponseCode.NO_ERROR:
        from dnsget.dns_types import DnsError

        raise DnsError(f"Error from resolver: {message.header.resp_code}")

    print("\nQuestions:")
    for question in message.question:
        print(question)

    if not (message.answer or message.authority or message.additional):
        print("No DNS records returned.")
        return

    sections = [("Answer Records:", message.answer)]
    if verbose:
        sections += [
            ("Authority Records:", message.authority),
            ("Additional Records:", message.additional),
        ]
    for title, records in sections:
        if records:
            print(title)
            for record in records:
                print(record.as_dns_response())