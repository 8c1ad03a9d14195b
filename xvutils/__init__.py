"""Pieces of a small teaching operating system: parsers, data formats, helpers and file tools."""

__version__ = "0.1.0"