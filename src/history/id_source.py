"""Simulated commit identifier sources.

Commit logs draw ids from an injected source instead of process-global
random state, so callers and tests control the id sequence.
"""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Protocol

from core.constants import DEFAULT_ID_UPPER_BOUND
from core.errors import CommitLogIdSourceError


class IdSource(Protocol):
    """Producer of simulated commit identifiers."""

    def next_id(self) -> int:
        """Return the next commit identifier."""
        ...


class RandomIdSource:
    """Pseudo-random ids in ``[0, upper_bound)``.

    Collisions are possible and are left to the caller.
    """

    def __init__(self, seed: int | None = None, upper_bound: int = DEFAULT_ID_UPPER_BOUND) -> None:
        """Initialize a private random generator.

        Args:
            seed: Optional seed for reproducible sequences.
            upper_bound: Exclusive upper bound for generated ids.

        Raises:
            CommitLogIdSourceError: If upper bound is not positive.
        """
        if upper_bound <= 0:
            raise CommitLogIdSourceError(f"Id upper bound must be positive, got {upper_bound}.")
        self._random = random.Random(seed)
        self._upper_bound = upper_bound

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    def next_id(self) -> int:
        return self._random.randrange(self._upper_bound)


class SequenceIdSource:
    """Deterministic ids replayed from a fixed sequence."""

    def __init__(
        self,
        ids: Iterable[int],
        upper_bound: int = DEFAULT_ID_UPPER_BOUND,
    ) -> None:
        if upper_bound <= 0:
            raise CommitLogIdSourceError(f"Id upper bound must be positive, got {upper_bound}.")
        self._ids: Iterator[int] = iter(ids)
        self._upper_bound = upper_bound

    def next_id(self) -> int:
        """Return the next id from the sequence.

        Returns:
            Next configured id.

        Raises:
            CommitLogIdSourceError: If the sequence is exhausted or the
                id falls outside ``[0, upper_bound)``.
        """
        try:
            commit_id = next(self._ids)
        except StopIteration as error:
            raise CommitLogIdSourceError("Id sequence exhausted.") from error
        if not 0 <= commit_id < self._upper_bound:
            raise CommitLogIdSourceError(
                f"Id {commit_id} outside allowed range [0, {self._upper_bound})."
            )
        return commit_id
