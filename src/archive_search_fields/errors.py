"""Errors shared across domain packages."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when configuration, index mappings or relation tables are invalid."""
