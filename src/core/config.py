"""Runtime configuration model for commitlog.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ID_UPPER_BOUND,
    ID_UPPER_BOUND_ENV_VAR,
    RANDOM_SEED_ENV_VAR,
)
from core.errors import CommitLogConfigError
from history.id_source import RandomIdSource


@dataclass(frozen=True)
class CommitLogConfig:
    """Validated runtime configuration.

    Attributes:
        random_seed: Optional seed for simulated commit ids. When absent
            ids are drawn from system entropy.
        id_upper_bound: Exclusive upper bound for simulated commit ids.
    """

    random_seed: int | None
    id_upper_bound: int = DEFAULT_ID_UPPER_BOUND

    @classmethod
    def from_env(cls) -> "CommitLogConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CommitLogConfigError: If environment values are invalid.
        """
        random_seed_value = os.getenv(RANDOM_SEED_ENV_VAR)
        random_seed = None
        if random_seed_value is not None and random_seed_value.strip():
            random_seed = _parse_random_seed(random_seed_value)
        upper_bound_value = os.getenv(ID_UPPER_BOUND_ENV_VAR, "").strip()
        id_upper_bound = DEFAULT_ID_UPPER_BOUND
        if upper_bound_value:
            id_upper_bound = _parse_id_upper_bound(upper_bound_value)
        return cls(random_seed=random_seed, id_upper_bound=id_upper_bound)

    def build_id_source(self) -> RandomIdSource:
        """Build the default commit id source for this configuration."""
        return RandomIdSource(seed=self.random_seed, upper_bound=self.id_upper_bound)


def _parse_random_seed(raw_value: str) -> int:
    """Parse the random seed environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed integer seed.

    Raises:
        CommitLogConfigError: If value cannot be parsed into int.
    """
    try:
        return int(raw_value)
    except ValueError as error:
        raise CommitLogConfigError(
            f"Invalid {RANDOM_SEED_ENV_VAR} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {RANDOM_SEED_ENV_VAR} to a numeric value or unset it."
        ) from error


def _parse_id_upper_bound(raw_value: str) -> int:
    """Parse the commit id upper bound environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer bound.

    Raises:
        CommitLogConfigError: If value is not a positive integer.
    """
    try:
        upper_bound = int(raw_value)
    except ValueError as error:
        raise CommitLogConfigError(
            f"Invalid {ID_UPPER_BOUND_ENV_VAR} value: "
            f"expected integer, got '{raw_value}'."
        ) from error
    if upper_bound <= 0:
        raise CommitLogConfigError(
            f"Invalid {ID_UPPER_BOUND_ENV_VAR} value: "
            f"expected a positive integer, got {upper_bound}."
        )
    return upper_bound
