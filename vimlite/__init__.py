"""A small modal terminal text editor with vi-style keys, editing one in-memory buffer."""

__version__ = "0.1.0"