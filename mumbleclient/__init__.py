"""Send-only client for the Mumble control protocol: TLS connection, message framing and login."""

__version__ = "0.1.0"