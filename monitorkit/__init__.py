"""Monitor-style thread synchronization primitives and shared data structures."""

__version__ = "0.1.0"