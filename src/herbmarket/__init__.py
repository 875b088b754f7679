"""Randomized herb market stock generator."""

__version__ = "0.1.0"
