"""taskflow - a minimalist, local-first task tracker for developers."""

__version__ = "0.1.0"
