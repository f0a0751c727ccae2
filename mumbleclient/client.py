"""High-level Mumble client."""

from __future__ import annotations

import platform
import ssl
from collections.abc import Iterable

from .config import Config
from .connection import TCPConn
from .messages import Authenticate, UDPTunnel, Version
from .version import (
    MUMBLE_RELEASE,
    MUMBLE_VERSION_MAJOR,
    MUMBLE_VERSION_MINOR,
    MUMBLE_VERSION_PATCH,
    get_version_v2,
)


class Mumble:
    """A client bound to a configuration and an open control connection."""

    def __init__(self, config: Config, conn: TCPConn) -> None:
        self.config = config
        self.conn = conn

    @classmethod
    def open(cls, config: Config, ssl_context: ssl.SSLContext | None = None) -> "Mumble":
        """Open a TLS connection to the configured server."""
        return cls(config, TCPConn.open(config.net(), ssl_context))

    def connect(self) -> None:
        """Announce the client version, then log in with the configured credentials."""
        self.version(
            version_v2=get_version_v2(
                MUMBLE_VERSION_MAJOR, MUMBLE_VERSION_MINOR, MUMBLE_VERSION_PATCH
            ),
            release=MUMBLE_RELEASE,
            os=platform.system().lower(),
            os_version=platform.machine(),
        )
        self.authenticate(
            username=self.config.username,
            password=self.config.password,
            opus=True,
        )

    def version(
        self,
        *,
        version_v1: int = 0,
        version_v2: int = 0,
        release: str = "",
        os: str = "",
        os_version: str = "",
    ) -> None:
        """Send a Version message."""
        self.conn.write_packet(
            Version(
                version_v1=version_v1,
                version_v2=version_v2,
                release=release,
                os=os,
                os_version=os_version,
            )
        )

    def udp_tunnel(self, packet: bytes) -> None:
        """Send voice data through the control connection."""
        self.conn.write_packet(UDPTunnel(packet))

    def authenticate(
        self,
        *,
        username: str = "",
        password: str = "",
        tokens: Iterable[str] = (),
        celt_versions: Iterable[int] = (),
        opus: bool = False,
        client_type: int = 0,
    ) -> None:
        """Send an Authenticate message."""
        self.conn.write_packet(
            Authenticate(
                username=username,
                password=password,
                tokens=list(tokens),
                celt_versions=list(celt_versions),
                opus=opus,
                client_type=client_type,
            )
        )

    def close(self) -> None:
        """Close the control connection."""
        self.conn.close()

    def __enter__(self) -> "Mumble":
        return self

    def __exit__(self, *args) -> None:
        self.close()