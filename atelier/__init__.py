"""Atelier - catalog management and integrity monitoring."""

__version__ = "0.1.0"
