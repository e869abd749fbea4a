"""Commit log value type.

This module implements an ordered, append-only-at-tail sequence of
commit records with value semantics. Every copy path (copy protocol,
assignment, duplicate, and merge) allocates fresh records, so no two
logs ever reach the same record object.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.logging_config import get_logger
from core.types import CommitRecord
from history.id_source import IdSource, RandomIdSource
from history.rendering import render_records

_LOGGER = get_logger(__name__)


class CommitLog:
    """Ordered commit history, oldest record first.

    Records live in a private list owned by the log. The id source is
    not a record and is shared by logs copied from this one.
    """

    def __init__(self, id_source: IdSource | None = None) -> None:
        """Create an empty commit log.

        Args:
            id_source: Identifier source for new commits. Defaults to an
                unseeded ``RandomIdSource``.
        """
        self._id_source: IdSource = id_source if id_source is not None else RandomIdSource()
        self._records: list[CommitRecord] = []

    @classmethod
    def from_log(cls, other: "CommitLog") -> "CommitLog":
        """Copy-construct an independent log from ``other``."""
        log = cls(id_source=other._id_source)
        log._records = _clone_records(other._records)
        return log

    @property
    def id_source(self) -> IdSource:
        return self._id_source

    def append(self, message: str) -> int:
        """Append a new commit as the newest record.

        Args:
            message: Commit message.

        Returns:
            Simulated id assigned to the new commit.
        """
        record = CommitRecord(commit_id=self._id_source.next_id(), message=message)
        self._records.append(record)
        _LOGGER.info("commit_appended", commit_id=record.commit_id, message=record.message)
        return record.commit_id

    def render(self) -> str:
        """Render every record as ``[id] message`` joined oldest to newest."""
        return render_records(self._records)

    def truncate_last(self) -> CommitRecord | None:
        """Remove the most recently appended record.

        Returns:
            The removed record, or None when the log was already empty.
        """
        if not self._records:
            _LOGGER.info("commit_truncate_skipped", reason="empty_log")
            return None
        removed = self._records.pop()
        _LOGGER.info(
            "commit_truncated",
            commit_id=removed.commit_id,
            remaining=len(self._records),
        )
        return removed

    def find_by_id(self, commit_id: int) -> CommitRecord | None:
        """Return the oldest record carrying ``commit_id``, if any."""
        for record in self._records:
            if record.commit_id == commit_id:
                _LOGGER.debug("commit_lookup", commit_id=commit_id, found=True)
                return record
        _LOGGER.debug("commit_lookup", commit_id=commit_id, found=False)
        return None

    def duplicate(self) -> "CommitLog":
        """Return an independent deep copy of this log."""
        return CommitLog.from_log(self)

    def assign(self, other: "CommitLog") -> "CommitLog":
        """Replace this log's contents with a deep copy of ``other``.

        The copy is built before the current records are released, so
        assigning a log to itself leaves it unchanged.

        Args:
            other: Source log.

        Returns:
            This log, for chaining.
        """
        if other is self:
            return self
        replacement = _clone_records(other._records)
        self._records = replacement
        self._id_source = other._id_source
        _LOGGER.debug("commit_log_assigned", record_count=len(replacement))
        return self

    @staticmethod
    def merge(
        branch_a: "CommitLog",
        branch_b: "CommitLog",
        id_source: IdSource | None = None,
    ) -> "CommitLog":
        """Build a new log from copies of two branches.

        Neither branch is modified and the result shares no record
        with them. Records of ``branch_a`` come first, then those of
        ``branch_b``, each in their original order.

        Args:
            branch_a: Branch whose records lead the result.
            branch_b: Branch whose records follow.
            id_source: Id source for the merged log. Defaults to the
                source held by ``branch_a``.

        Returns:
            Newly owned merged log.
        """
        merged = CommitLog(id_source=id_source if id_source is not None else branch_a._id_source)
        merged._records = _clone_records(branch_a._records) + _clone_records(branch_b._records)
        _LOGGER.info(
            "branches_merged",
            left_count=len(branch_a),
            right_count=len(branch_b),
            record_count=len(merged),
        )
        return merged

    def records(self) -> tuple[CommitRecord, ...]:
        """Return a read-only snapshot of the records, oldest first."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CommitRecord]:
        return iter(tuple(self._records))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommitLog):
            return NotImplemented
        return self._records == other._records

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "CommitLog":
        return CommitLog.from_log(self)

    def __deepcopy__(self, memo: dict[int, object]) -> "CommitLog":
        copied = CommitLog.from_log(self)
        memo[id(self)] = copied
        return copied

    def __repr__(self) -> str:
        return f"CommitLog({self.render()!r})"


def _clone_records(records: Iterable[CommitRecord]) -> list[CommitRecord]:
    """Allocate fresh records with the same values and order."""
    return [record.clone() for record in records]
