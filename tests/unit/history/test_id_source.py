"""Unit tests for simulated commit id sources."""

from __future__ import annotations

import pytest

from core.errors import CommitLogIdSourceError
from history.id_source import RandomIdSource, SequenceIdSource


def test_random_id_source_stays_in_range() -> None:
    """Random ids should fall within [0, upper_bound)."""
    source = RandomIdSource(seed=3, upper_bound=10)

    ids = [source.next_id() for _ in range(200)]

    assert min(ids) >= 0 and max(ids) < 10


def test_random_id_source_rejects_non_positive_bound() -> None:
    """Random source should refuse an empty id range."""
    with pytest.raises(CommitLogIdSourceError):
        RandomIdSource(upper_bound=0)


def test_sequence_id_source_replays_ids_in_order() -> None:
    """Sequence source should return configured ids in order."""
    source = SequenceIdSource([5, 1, 5])

    ids = [source.next_id() for _ in range(3)]

    assert ids == [5, 1, 5]


def test_sequence_id_source_raises_when_exhausted() -> None:
    """Sequence source should fail once no ids remain."""
    source = SequenceIdSource([1])
    source.next_id()

    with pytest.raises(CommitLogIdSourceError):
        source.next_id()


def test_sequence_id_source_rejects_out_of_range_id() -> None:
    """Sequence source should reject ids at or beyond the bound."""
    source = SequenceIdSource([100000])

    with pytest.raises(CommitLogIdSourceError):
        source.next_id()


def test_sequence_id_source_rejects_non_positive_bound() -> None:
    """Sequence source should refuse an empty id range up front."""
    with pytest.raises(CommitLogIdSourceError):
        SequenceIdSource([0], upper_bound=0)
