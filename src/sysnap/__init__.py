"""sysnap - one-shot system metrics snapshot."""

__version__ = "0.3.0"
