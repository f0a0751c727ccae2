import socket
import struct

import pytest

from mumbleclient.config import NetConfig
from mumbleclient.connection import TCPConn, create_header
from mumbleclient.errors import (
    ErrorCode,
    InvalidMessageTypeError,
    SerializationError,
    TCPConnectionError,
    TCPIncompleteWriteError,
    TCPWriteError,
)
from mumbleclient.messages import Authenticate, MessageType, UDPTunnel, Version


class _FakeSocket:
    def __init__(self, send_result=None, send_error=None, close_error=None):
        self.send_result = send_result
        self.send_error = send_error
        self.close_error = close_error
        self.closed = False

    def send(self, data):
        if self.send_error is not None:
            raise self.send_error
        return len(data) if self.send_result is None else self.send_result(data)

    def close(self):
        if self.close_error is not None:
            raise self.close_error
        self.closed = True


def _recv_exact(sock, size):
    chunks = []
    while size:
        chunk = sock.recv(size)
        assert chunk, "connection closed early"
        chunks.append(chunk)
        size -= len(chunk)
    return b"".join(chunks)


def _read_frame(sock):
    message_type, length = struct.unpack(">HI", _recv_exact(sock, 6))
    return message_type, _recv_exact(sock, length)


def _unused_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_header_of_empty_version():
    assert create_header(MessageType.VERSION, 0) == b"\x00\x00\x00\x00\x00\x00"


@pytest.mark.parametrize("message_type, length", [(2, 0x01020304), (26, 0), (65535, 2**32 - 1)])
def test_header_round_trip(message_type, length):
    header = create_header(message_type, length)
    assert len(header) == 6
    assert struct.unpack(">HI", header) == (message_type, length)


def test_write_packet_frames_message():
    left, right = socket.socketpair()
    with left, right:
        conn = TCPConn(left)
        msg = UDPTunnel(b"\x01\x02\x03")
        conn.write_packet(msg)
        message_type, payload = _read_frame(right)
    assert message_type == MessageType.UDP_TUNNEL
    assert payload == msg.encode()


def test_write_packets_in_order():
    left, right = socket.socketpair()
    with left, right:
        conn = TCPConn(left)
        conn.write_packet(Version(release="r"))
        conn.write_packet(Authenticate(username="alice"))
        first = _read_frame(right)
        second = _read_frame(right)
    assert first == (MessageType.VERSION, Version(release="r").encode())
    assert second == (MessageType.AUTHENTICATE, Authenticate(username="alice").encode())


def test_unsupported_message():
    fake = _FakeSocket(send_error=AssertionError("must not send"))
    with pytest.raises(InvalidMessageTypeError) as info:
        TCPConn(fake).write_packet(object())
    assert info.value.code is ErrorCode.INVALID_MESSAGE


def test_serialization_failure():
    fake = _FakeSocket(send_error=AssertionError("must not send"))
    with pytest.raises(SerializationError) as info:
        TCPConn(fake).write_packet(Version(version_v1=-1))
    assert isinstance(info.value.err, ValueError)


def test_write_failure_wraps_os_error():
    failure = OSError("reset")
    with pytest.raises(TCPWriteError) as info:
        TCPConn(_FakeSocket(send_error=failure)).write_packet(Version())
    assert info.value.err is failure
    assert info.value.code is ErrorCode.CONNECTION


def test_incomplete_write():
    fake = _FakeSocket(send_result=lambda data: len(data) - 1)
    with pytest.raises(TCPIncompleteWriteError):
        TCPConn(fake).write_packet(UDPTunnel(b"xyz"))


def test_close_closes_socket():
    left, right = socket.socketpair()
    with right:
        TCPConn(left).close()
        assert left.fileno() == -1


def test_context_manager_closes():
    fake = _FakeSocket()
    with TCPConn(fake) as conn:
        conn.write_packet(Version())
    assert fake.closed is True


def test_close_failure():
    failure = OSError("bad descriptor")
    with pytest.raises(TCPConnectionError) as info:
        TCPConn(_FakeSocket(close_error=failure)).close()
    assert info.value.err is failure


def test_open_refused():
    with pytest.raises(TCPConnectionError) as info:
        TCPConn.open(NetConfig("127.0.0.1", _unused_port()), None)
    assert info.value.message == "failed to connect to server"
    assert isinstance(info.value.err, OSError)