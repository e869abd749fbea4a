"""Core constants used across commitlog modules.

This module centralizes output templates and identifier bounds.
Keeping values here avoids magic literals in history logic.
"""

from __future__ import annotations

DEFAULT_ID_UPPER_BOUND = 100000
LOG_DELIMITER = " <- "
EMPTY_LOG_TEXT = "(no commits)"
COMMITTED_LINE_PREFIX = "Committed: "
COMMIT_FOUND_LINE_PREFIX = "Commit found: "
COMMIT_NOT_FOUND_TEMPLATE = "Commit with hash {commit_id} not found."
TRUNCATED_LINE = "Last commit removed (reset)."
NOTHING_TO_TRUNCATE_LINE = "No commits to reset."
MERGED_LINE = "Branches merged."
RANDOM_SEED_ENV_VAR = "COMMITLOG_RANDOM_SEED"
ID_UPPER_BOUND_ENV_VAR = "COMMITLOG_ID_UPPER_BOUND"
