"""Public SDK surface for commitlog.

This module provides a stable import path for library users.
It re-exports the commit log, its record type, and id sources.
"""

from __future__ import annotations

from core.config import CommitLogConfig
from core.errors import CommitLogConfigError, CommitLogError, CommitLogIdSourceError
from core.types import CommitRecord
from history.commit_log import CommitLog
from history.id_source import IdSource, RandomIdSource, SequenceIdSource
from history.rendering import (
    format_commit_line,
    format_find_line,
    format_merge_line,
    format_truncate_line,
    render_records,
)

__all__ = [
    "CommitLog",
    "CommitLogConfig",
    "CommitLogConfigError",
    "CommitLogError",
    "CommitLogIdSourceError",
    "CommitRecord",
    "IdSource",
    "RandomIdSource",
    "SequenceIdSource",
    "format_commit_line",
    "format_find_line",
    "format_merge_line",
    "format_truncate_line",
    "render_records",
]
