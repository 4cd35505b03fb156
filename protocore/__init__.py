"""Core utilities for prototyping: vectors, poses, matrices, checksums, timers, code emission, file helpers and logging."""

__version__ = "0.1.0"