"""Shared helpers: logging, app paths, colour."""
