"""In-memory commit history.

This module holds the commit log value type, its identifier sources,
and the formatting of human-readable status lines.
"""
