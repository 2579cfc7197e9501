"""Command-line entry point: parse arguments, query a resolver, print the result."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

from dnsget.dns_types import DnsError, RecordType
from dnsget.message import Message
from dnsget.network import print_response, send_request

HELP = """\
dnsget -- domain information gatherer, obviously
USAGE:
  dnsget [OPTIONS] --record-type TYPE NAME
FLAGS:
  -h, --help                Prints help information
  -v, --verbose             Enable verbose output
OPTIONS:
  -t, --record-type TYPE    Choose the DNS record type (A, AAAA, CNAME, SOA, NS, MX, TXT, PTR, SRV, or ALL)
  -r, --resolver IP         Which DNS resolver to query (default is 1.1.1.1:53)
ARGS:
  NAME A domain name to look up. Remember, these must be ASCII.
"""

DEFAULT_RESOLVER = ("1.1.1.1", 53)

ALL_RECORD_TYPES = (
    RecordType.A,
    RecordType.AAAA,
    RecordType.CNAME,
    RecordType.NS,
    RecordType.SOA,
    RecordType.MX,
    RecordType.TXT,
    RecordType.PTR,
    RecordType.SRV,
)


@dataclass(frozen=True)
class AppArgs:
    """Values derived from the command-line arguments."""

    record_type: RecordType
    name: str
    resolver: tuple[str, int]
    verbose: bool


def _take_flag(args: list[str], keys: tuple[str, ...]) -> bool:
    for index, arg in enumerate(args):
        if arg in keys:
            del args[index]
            return True
    return False


def _take_value(args: list[str], key: str) -> str | None:
    for index, arg in enumerate(args):
        if arg == key:
            if index + 1 >= len(args):
                raise ValueError(f"the '{key}' option doesn't have an associated value")
            value = args[index + 1]
            del args[index:index + 2]
            return value
        if arg.startswith(key + "="):
            del args[index]
            return arg[len(key) + 1:]
    return None


def _parse_record_type(text: str) -> RecordType:
    try:
        return RecordType.from_str(text)
    except DnsError as exc:
        raise ValueError(f"failed to parse '{text}': {exc}") from exc


def _parse_socket_addr(text: str) -> tuple[str, int]:
    error = ValueError(f"failed to parse '{text}': invalid socket address syntax")
    try:
        if text.startswith("["):
            host, sep, port = text[1:].partition("]:")
            address = str(IPv6Address(host))
        else:
            host, sep, port = text.rpartition(":")
            address = str(IPv4Address(host))
    except ValueError:
        raise error from None
    if not sep or not port.isdigit() or int(port) > 0xFFFF:
        raise error
    return address, int(port)


def parse_args(argv: list[str] | None = None) -> AppArgs:
    """Parse command-line arguments.

    Raises ``ValueError`` for malformed arguments, and ``SystemExit`` for
    ``--help`` or a wrong use of the record-type option.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if _take_flag(args, ("-h", "--help")):
        print(HELP, end="")
        raise SystemExit(0)

    long_type = _take_value(args, "--record-type")
    short_type = _take_value(args, "-t")
    if (long_type is None) == (short_type is None):
        print("You must supply exactly one of either -t or --record-type", file=sys.stderr)
        print(HELP, end="")
        raise SystemExit(1)
    record_type = _parse_record_type(long_type if long_type is not None else short_type)

    long_resolver = _take_value(args, "--resolver")
    short_resolver = _take_value(args, "-r")
    resolver_text = long_resolver if long_resolver is not None else short_resolver
    resolver = DEFAULT_RESOLVER if resolver_text is None else _parse_socket_addr(resolver_text)

    verbose = _take_flag(args, ("-v", "--verbose"))

    if not args:
        raise ValueError("the free-standing argument is missing")
    name = args.pop(0)
    if not name.isascii():
        print(f"DNS names must be ASCII, and {name} is not.", file=sys.stderr)
        raise SystemExit(1)
    if not name.endswith("."):
        name += "."

    if args:
        print(f"Warning: unused arguments left: {args}.", file=sys.stderr)

    return AppArgs(record_type=record_type, name=name, resolver=resolver, verbose=verbose)


def query_and_print(
    name: str, record_type: RecordType, resolver: tuple[str, int], verbose: bool = False
) -> None:
    """Query ``resolver`` for one record type and print the outcome; errors go to stderr."""
    query_id = random.getrandbits(16)
    try:
        message = Message.new_query(query_id, name, record_type)
    except DnsError as exc:
        print(f"Failed to build query: {exc}", file=sys.stderr)
        return
    try:
        response = send_request(message, resolver, verbose)
    except OSError as exc:
        print(f"Network error: {exc}", file=sys.stderr)
        return
    try:
        print_response(response, query_id, verbose)
    except DnsError as exc:
        print(f"Error: {exc}", file=sys.stderr)


def query_all_records(name: str, resolver: tuple[str, int], verbose: bool = False) -> None:
    """Query every concrete record type in turn."""
    for record_type in ALL_RECORD_TYPES:
        print(f"--- {record_type} RECORDS ---")
        query_and_print(name, record_type, resolver, verbose)


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    try:
        args = parse_args(argv)
    except ValueError as exc:
        print(
            f"Error parsing arguments: {exc}\n\nRun with --help to see usage.",
            file=sys.stderr,
        )
        return 1

    if args.record_type is RecordType.ALL:
        query_all_records(args.name, args.resolver, args.verbose)
    else:
        query_and_print(args.name, args.record_type, args.resolver, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())