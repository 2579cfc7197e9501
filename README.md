# dnsget

A small command-line DNS client. It builds a DNS query, sends it over UDP to a
resolver and prints the records that come back.

## Installation

```
pip install .
```

This installs the `dnsget` command. It needs nothing beyond the Python
standard library.

## Usage

```
dnsget [OPTIONS] --record-type TYPE NAME
```

Flags:

- `-h`, `--help`: print help information and exit
- `-v`, `--verbose`: print the local and remote socket addresses, the request
  and response sizes, the raw response bytes, and the authority and additional
  sections of the reply

Options:

- `-t`, `--record-type TYPE`: the record type to ask for: `A`, `AAAA`, `CNAME`,
  `SOA`, `NS`, `MX`, `TXT`, `PTR`, `SRV`, or `ALL` (case-insensitive). Exactly
  one of `-t` and `--record-type` must be given. `ALL` queries each of the other
  types in turn, printing a `--- TYPE RECORDS ---` line before each.
- `-r`, `--resolver IP:PORT`: the resolver to query, as an IPv4 address and
  port (`9.9.9.9:53`) or a bracketed IPv6 address and port (`[::1]:53`).
  The default is `1.1.1.1:53`.

`NAME` is the domain name to look up. It must be ASCII; a trailing dot is added
when it is missing. Arguments left over are reported as a warning and ignored.

The command waits up to five seconds for a reply. Each query uses a random
16-bit ID; a reply carrying a different ID is printed with a warning. If the
resolver reports an error code, its description is printed to standard error.

### Examples

```
dnsget -t A example.com
dnsget --record-type MX --resolver 9.9.9.9:53 example.com
dnsget -v -t ALL example.com
```

Sample output:

```
Questions:
A: example.com.
Answer Records:
A: 192.0.2.10 (TTL 3600)
```

## Using it as a library

The message format is available without going to the network:

```python
from dnsget.dns_types import RecordType
from dnsget.message import Message

query = Message.new_query(33, "example.com.", RecordType.A)
wire = query.serialize()

reply = Message.deserialize(wire)
print(reply.header.id, [str(q) for q in reply.question])
for record in reply.answer:
    print(record.as_dns_response())
```

- `dnsget.dns_types` holds `RecordType`, `DnsClass` and `DnsError`, the
  exception raised for data that cannot be built or parsed.
- `dnsget.header.Header`, `dnsget.question.Question` and `dnsget.record.Record`
  (with `MxData`, `SrvData` and `SoaData`) model the parts of a message.
- `dnsget.network.send_request(message, resolver, verbose)` sends a message to
  an `(ip, port)` resolver and returns the raw reply bytes.
- `dnsget.network.print_response(response, sent_query_id, verbose)` parses the
  reply and prints it the way the command does.

## Limitations

- Queries go over UDP only, with replies of up to 512 bytes; there is no TCP
  fallback for truncated replies and no EDNS.
- Only the `IN` class is understood.
- A reply holding a record of a type not listed above (for example a DNSSEC
  record) cannot be parsed and is reported as an error.
- For `TXT` records only the first character-string of the record data is shown.

## Running the tests

```
pip install .[test]
pytest
```