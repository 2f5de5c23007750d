"""Shared constants for Graphgate modules."""
