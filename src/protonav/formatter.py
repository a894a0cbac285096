"""Compact result formatting for REPL command output.

Results are single lines prefixed ``+`` on success and ``!`` on failure;
listings are newline-joined names. Unknown names get a fuzzy suggestion.
"""

from __future__ import annotations

import difflib
from collections.abc import Iterable


def format_result(success: bool, message: str, prefix: str = "") -> str:
    """Format a command result line.

    Parameters
    ----------
    success : bool
        Whether the command succeeded.
    message : str
        The result message.
    prefix : str, optional
        Override prefix character. Defaults to ``+`` for success and ``!``
        for failure.
    """
    if prefix:
        return f"{prefix} {message}"
    return f"{'+' if success else '!'} {message}"


def format_names(names: Iterable[str], empty: str = "(none)") -> str:
    """One name per line, or *empty* when there are none."""
    lines = list(names)
    if not lines:
        return empty
    return "\n".join(lines)


def suggest(input_str: str, candidates: Iterable[str]) -> str | None:
    """Closest candidate to *input_str* (difflib ratio >= 0.6), or None."""
    matches = difflib.get_close_matches(input_str, list(candidates), n=1, cutoff=0.6)
    return matches[0] if matches else None
