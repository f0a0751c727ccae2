"""Error types raised by the Mumble client."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable category of a client error."""

    SERIALIZATION = "SERIALIZATION_ERROR"
    CONNECTION = "CONNECTION_ERROR"
    INVALID_MESSAGE = "INVALID_MESSAGE"


class MumbleError(Exception):
    """Base error carrying a code, a message and an optional underlying error."""

    def __init__(
        self, code: ErrorCode, message: str, err: BaseException | None = None
    ) -> None:
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.err = err
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        if self.err is not None:
            return f"[{self.code.value}] {self.message}: {self.err}"
        return f"[{self.code.value}] {self.message}"


class SerializationError(MumbleError):
    """A message could not be encoded."""

    def __init__(self, message: str, err: BaseException | None = None) -> None:
        super().__init__(ErrorCode.SERIALIZATION, message, err)


class InvalidMessageTypeError(MumbleError):
    """A message of an unknown or unsupported type was given."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.INVALID_MESSAGE, message)


class TCPConnectionError(MumbleError):
    """The TCP connection could not be established or closed."""

    def __init__(self, message: str, err: BaseException | None = None) -> None:
        super().__init__(ErrorCode.CONNECTION, message, err)


class TCPWriteError(MumbleError):
    """Writing to the TCP connection failed."""

    def __init__(self, message: str, err: BaseException | None = None) -> None:
        super().__init__(ErrorCode.CONNECTION, message, err)


class TCPIncompleteWriteError(MumbleError):
    """Only part of a packet was written to the TCP connection."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.CONNECTION, message)