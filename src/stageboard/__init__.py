"""Stageboard: a staged task board with two-at-a-time assignment."""

__version__ = "0.1.0"
