"""Hotseat: two-player chess board with a naive move generator."""

__version__ = "0.1.0"
