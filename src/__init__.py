"""Chunked, unbounded Conway's Game of Life simulation."""

__version__ = "0.1.0"
