"""Utility functions."""

from .text import headline

__all__ = ["headline"]
