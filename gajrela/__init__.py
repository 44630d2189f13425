"""Approximate nutrition estimates for Gajar Ka Halwa (Gajrela)."""

__version__ = "0.1.0"
