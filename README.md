# mumbleclient

A small Python client for the control channel of a Mumble voice chat
server. It opens a TLS connection, encodes messages in the protocol-buffer
wire format, frames them with the six-byte Mumble header, and sends the
`Version` and `Authenticate` messages that start a session.

The package uses only the standard library.

## Installation

```
pip install mumbleclient
```

## Usage

```python
import ssl

from mumbleclient.client import Mumble
from mumbleclient.config import Config

password = "password"
config = Config(hostname="localhost", port=64738, username="alice", password=password)

ssl_context = ssl.create_default_context()
# For a local test server with a self-signed certificate:
# ssl_context.check_hostname = False
# ssl_context.verify_mode = ssl.CERT_NONE

with Mumble.open(config, ssl_context) as client:
    client.connect()  # sends Version, then Authenticate with Opus enabled
```

`Mumble.open(config, ssl_context=None)` connects to `config.hostname` and
`config.port` with a 5-second connect timeout and TCP keep-alive enabled.
Without an `ssl_context`, `ssl.create_default_context()` is used.

`Mumble.connect()` sends:

1. a `Version` message with `version_v2` for protocol version 1.5.0 (from
   `mumbleclient.version.get_version_v2`), the release name `Gumble`, the
   lower-cased operating system name (`platform.system()`) and the machine
   type (`platform.machine()`);
2. an `Authenticate` message with the configured username and password and
   `opus=True`.

Individual messages can also be sent directly:

- `Mumble.version(*, version_v1=0, version_v2=0, release="", os="", os_version="")`
- `Mumble.authenticate(*, username="", password=..., tokens=(), celt_versions=(), opus=False, client_type=0)`
- `Mumble.udp_tunnel(packet)` sends raw voice bytes through the TCP tunnel.

`Mumble.close()` closes the connection; `Mumble` is also a context manager.

## Modules

- `mumbleclient.config`: `Config` (hostname, port, username, password) with
  `net()` and `auth()` returning `NetConfig` and `AuthConfig`.
- `mumbleclient.version`: `get_version_v2(major, minor, patch)` packs the
  numbers into a 64-bit value (major << 48 | minor << 32 | patch << 16), and
  the constants `MUMBLE_VERSION_MAJOR`, `MUMBLE_VERSION_MINOR`,
  `MUMBLE_VERSION_PATCH` and `MUMBLE_RELEASE`.
- `mumbleclient.messages`: the `Version`, `UDPTunnel` and `Authenticate`
  dataclasses, each with `encode()` returning protocol-buffer bytes; the
  `MessageType` enum of all control message numbers (0 to 26); and
  `get_tcp_message_type(msg)`, which returns the `MessageType` of a supported
  message or `None`.
- `mumbleclient.connection`: `TCPConn`, a thread-safe framed writer over a
  socket (`TCPConn.open(net_config, ssl_context=None)`, `write_packet(msg)`,
  `close()`, context manager), and `create_header(message_type,
  payload_length)`, which builds the 6-byte header: a big-endian 16-bit
  message type followed by a big-endian 32-bit payload length.

## Errors

Failures in the connection and client raise subclasses of
`mumbleclient.errors.MumbleError`, each with a `code` from `ErrorCode`:

- `TCPConnectionError` when connecting or closing fails,
- `TCPWriteError` when sending fails, `TCPIncompleteWriteError` when only
  part of a packet was sent,
- `SerializationError` when a message cannot be encoded (for example a
  field of the wrong type or out of range),
- `InvalidMessageTypeError` when `write_packet` is given an object that is
  not a supported message.

`str()` of an error reads `[CODE] message` or `[CODE] message: cause`.
Calling a message's `encode()` directly raises `TypeError` or `ValueError`.

## What it does not do

The client only sends. It does not read or decode anything the server
sends back, so it does not answer pings, track channels or users, or report
whether login succeeded. Only `Version`, `UDPTunnel` and `Authenticate` can
be encoded and sent; the other message types exist only as numbers in
`MessageType`. There is no audio capture, codec or UDP voice channel, and
no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```