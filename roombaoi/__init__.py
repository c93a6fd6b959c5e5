"""Roomba Open Interface command packets and a stream-based controller."""

__version__ = "0.1.0"
__all__ = ["interface", "protocol"]