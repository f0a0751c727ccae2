"""TLS control connection to a Mumble server."""

from __future__ import annotations

import socket
import ssl
import struct
import threading

from .config import NetConfig
from .errors import (
    InvalidMessageTypeError,
    SerializationError,
    TCPConnectionError,
    TCPIncompleteWriteError,
    TCPWriteError,
)
from .messages import get_tcp_message_type

DIAL_TIMEOUT = 5.0
DIAL_KEEPALIVE = 30

_HEADER = struct.Struct(">HI")


def create_header(message_type: int, payload_length: int) -> bytes:
    """Build the 6-byte frame header: big-endian type then payload length."""
    return _HEADER.pack(message_type, payload_length)


def _enable_keepalive(sock: socket.socket) -> None:
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
    for option in ("TCP_KEEPIDLE", "TCP_KEEPINTVL", "TCP_KEEPALIVE"):
        value = getattr(socket, option, None)
        if value is not None:
            sock.setsockopt(socket.IPPROTO_TCP, value, DIAL_KEEPALIVE)


class TCPConn:
    """Framed, thread-safe writer over a (TLS) socket."""

    def __init__(self, sock) -> None:
        self._sock = sock
        self._lock = threading.Lock()

    @classmethod
    def open(
        cls, net_config: NetConfig, ssl_context: ssl.SSLContext | None = None
    ) -> "TCPConn":
        """Connect to the server and complete the TLS handshake."""
        context = ssl_context if ssl_context is not None else ssl.create_default_context()
        address = (net_config.hostname, net_config.port)
        try:
            raw = socket.create_connection(address, timeout=DIAL_TIMEOUT)
        except OSError as exc:
            raise TCPConnectionError("failed to connect to server", exc) from exc
        try:
            _enable_keepalive(raw)
            sock = context.wrap_socket(raw, server_hostname=net_config.hostname)
            sock.settimeout(None)
        except (OSError, ValueError) as exc:
            raw.close()
            raise TCPConnectionError("failed to connect to server", exc) from exc
        return cls(sock)

    def close(self) -> None:
        """Close the connection."""
        try:
            self._sock.close()
        except OSError as exc:
            raise TCPConnectionError("failed to close TCP connection", exc) from exc

    def __enter__(self) -> "TCPConn":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def write_packet(self, msg) -> None:
        """Encode a message, frame it and send it in one write."""
        with self._lock:
            message_type = get_tcp_message_type(msg)
            if message_type is None:
                raise InvalidMessageTypeError("unsupported or invalid TCP message type")
            try:
                data = msg.encode()
            except (TypeError, ValueError) as exc:
                raise SerializationError("failed to marshal proto", exc) from exc
            packet = create_header(message_type, len(data)) + data
            try:
                sent = self._sock.send(packet)
            except OSError as exc:
                raise TCPWriteError("failed to write to TCP connection", exc) from exc
            if sent != len(packet):
                raise TCPIncompleteWriteError("incomplete TCP packet write")