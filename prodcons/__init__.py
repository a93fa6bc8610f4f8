"""Multithreaded producer-consumer simulation over a two-priority bounded buffer."""

__version__ = "0.1.0"
__all__ = ["buffer", "workers", "simulation", "cli"]