"""Connection and authentication settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NetConfig:
    """Network address of the server."""

    hostname: str
    port: int


@dataclass
class AuthConfig:
    """Credentials used to log in."""

    username: str
    password: str


@dataclass
class Config:
    """Full client configuration: server address and credentials."""

    hostname: str
    port: int
    username: str
    password: str

    def net(self) -> NetConfig:
        """Return the network part of the configuration."""
        return NetConfig(self.hostname, self.port)

    def auth(self) -> AuthConfig:
        """Return the authentication part of the configuration."""
        return AuthConfig(self.username, self.password)