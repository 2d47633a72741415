"""Parsers and helpers for genome scaffolding and gap filling."""

__version__ = "0.1.0"