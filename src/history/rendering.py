"""Human-readable commit log output lines.

History operations return values and emit structured events. This
module turns those values into the text lines shown to users.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    COMMIT_FOUND_LINE_PREFIX,
    COMMIT_NOT_FOUND_TEMPLATE,
    COMMITTED_LINE_PREFIX,
    EMPTY_LOG_TEXT,
    LOG_DELIMITER,
    MERGED_LINE,
    NOTHING_TO_TRUNCATE_LINE,
    TRUNCATED_LINE,
)
from core.types import CommitRecord


def format_record(record: CommitRecord) -> str:
    """Format one record as ``[id] message``."""
    return f"[{record.commit_id}] {record.message}"


def render_records(records: Sequence[CommitRecord]) -> str:
    """Render records oldest to newest.

    Args:
        records: Ordered commit records.

    Returns:
        Records joined by a left arrow, or the empty-log sentinel.
    """
    if not records:
        return EMPTY_LOG_TEXT
    return LOG_DELIMITER.join(format_record(record) for record in records)


def format_commit_line(record: CommitRecord) -> str:
    return COMMITTED_LINE_PREFIX + format_record(record)


def format_truncate_line(removed: CommitRecord | None) -> str:
    """Describe the outcome of a truncate-last call."""
    if removed is None:
        return NOTHING_TO_TRUNCATE_LINE
    return TRUNCATED_LINE


def format_find_line(commit_id: int, record: CommitRecord | None) -> str:
    """Describe the outcome of a find-by-id call.

    Args:
        commit_id: Requested commit id.
        record: Matching record, or None when absent.

    Returns:
        Found line with the record, or the not-found line.
    """
    if record is None:
        return COMMIT_NOT_FOUND_TEMPLATE.format(commit_id=commit_id)
    return COMMIT_FOUND_LINE_PREFIX + format_record(record)


def format_merge_line() -> str:
    return MERGED_LINE
