"""Commitlog exception hierarchy.

History operations are total and never raise. These errors cover the
configuration and identifier-source boundaries around them.
"""

from __future__ import annotations


class CommitLogError(Exception):
    """Base exception for all commitlog failures."""


class CommitLogConfigError(CommitLogError):
    """Raised for invalid runtime configuration."""


class CommitLogIdSourceError(CommitLogError):
    """Raised when an identifier source cannot produce a valid id."""
