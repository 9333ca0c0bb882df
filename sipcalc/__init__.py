"""SIP projection engine and HTTP service."""

__version__ = "0.1.0"
