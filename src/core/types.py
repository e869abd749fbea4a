"""Shared typed models.

This module defines the immutable commit record held by commit logs
and read by the rendering helpers and CLI.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitRecord:
    """Single entry in a commit log.

    Attributes:
        commit_id: Simulated commit identifier. Not unique.
        message: Commit message supplied by the caller.
    """

    commit_id: int
    message: str

    def clone(self) -> "CommitRecord":
        """Return a new record object carrying the same values."""
        return CommitRecord(commit_id=self.commit_id, message=self.message)
