"""Folio - personal portfolio site renderer."""

__version__ = "0.1.0"
