"""Configuration, buffers and response building for a small static-file HTTP/1.1 server."""

__version__ = "1.0.1"