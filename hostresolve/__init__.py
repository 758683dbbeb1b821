"""Hostname resolution tools: batch lookups, a bounded FIFO queue and a threading demo."""

__version__ = "0.1.0"
__all__ = ["fifo", "resolver", "lookup", "hello"]