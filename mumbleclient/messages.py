"""Control-channel messages and their protocol-buffer wire encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class MessageType(IntEnum):
    """Numeric type of each message on the control channel."""

    VERSION = 0
    UDP_TUNNEL = 1
    AUTHENTICATE = 2
    PING = 3
    REJECT = 4
    SERVER_SYNC = 5
    CHANNEL_REMOVE = 6
    CHANNEL_STATE = 7
    USER_REMOVE = 8
    USER_STATE = 9
    BAN_LIST = 10
    TEXT_MESSAGE = 11
    PERMISSION_DENIED = 12
    ACL = 13
    QUERY_USERS = 14
    CRYPT_SETUP = 15
    CONTEXT_ACTION_MODIFY = 16
    CONTEXT_ACTION = 17
    USER_LIST = 18
    VOICE_TARGET = 19
    PERMISSION_QUERY = 20
    CODEC_VERSION = 21
    USER_STATS = 22
    REQUEST_BLOB = 23
    SERVER_CONFIG = 24
    SUGGEST_CONFIG = 25
    PLUGIN_DATA_TRANSMISSION = 26


_WIRE_VARINT = 0
_WIRE_LENGTH = 2
_UINT64_MASK = (1 << 64) - 1


def _varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _key(number: int, wire: int) -> bytes:
    return _varint(number << 3 | wire)


def _check_int(name: str, value: object, low: int, high: int) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")
    return value


def _uint(number: int, name: str, value: object, bits: int) -> bytes:
    checked = _check_int(name, value, 0, (1 << bits) - 1)
    return _key(number, _WIRE_VARINT) + _varint(checked)


def _int32(number: int, name: str, value: object) -> bytes:
    checked = _check_int(name, value, -(1 << 31), (1 << 31) - 1)
    return _key(number, _WIRE_VARINT) + _varint(checked & _UINT64_MASK)


def _bool(number: int, value: object) -> bytes:
    return _key(number, _WIRE_VARINT) + (b"\x01" if value else b"\x00")


def _bytes(number: int, name: str, value: object) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, not {type(value).__name__}")
    data = bytes(value)
    return _key(number, _WIRE_LENGTH) + _varint(len(data)) + data


def _string(number: int, name: str, value: object) -> bytes:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, not {type(value).__name__}")
    return _bytes(number, name, value.encode("utf-8"))


@dataclass
class Version:
    """Client version announcement."""

    version_v1: int = 0
    version_v2: int = 0
    release: str = ""
    os: str = ""
    os_version: str = ""

    def encode(self) -> bytes:
        """Serialise the message to protocol-buffer bytes."""
        return b"".join(
            (
                _uint(1, "version_v1", self.version_v1, 32),
                _string(2, "release", self.release),
                _string(3, "os", self.os),
                _string(4, "os_version", self.os_version),
                _uint(5, "version_v2", self.version_v2, 64),
            )
        )


@dataclass
class UDPTunnel:
    """Voice data tunnelled over the control channel."""

    packet: bytes | None = None

    def encode(self) -> bytes:
        """Serialise the message to protocol-buffer bytes."""
        if self.packet is None:
            raise ValueError("required field packet not set")
        return _bytes(1, "packet", self.packet)


@dataclass
class Authenticate:
    """Login request."""

    username: str = ""
    password: str = ""
    tokens: list[str] = field(default_factory=list)
    celt_versions: list[int] = field(default_factory=list)
    opus: bool = False
    client_type: int = 0

    def encode(self) -> bytes:
        """Serialise the message to protocol-buffer bytes."""
        parts = [
            _string(1, "username", self.username),
            _string(2, "password", self.password),
        ]
        parts.extend(_string(3, "tokens", token) for token in self.tokens)
        parts.extend(
            _int32(4, "celt_versions", version) for version in self.celt_versions
        )
        parts.append(_bool(5, self.opus))
        parts.append(_int32(6, "client_type", self.client_type))
        return b"".join(parts)


_MESSAGE_TYPES = {
    Version: MessageType.VERSION,
    UDPTunnel: MessageType.UDP_TUNNEL,
    Authenticate: MessageType.AUTHENTICATE,
}


def get_tcp_message_type(msg: object) -> MessageType | None:
    """Return the wire type of a message, or None if it is not supported."""
    return _MESSAGE_TYPES.get(type(msg))