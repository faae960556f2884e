"""Report formatting for the command-line interface."""

from .formatter import format_kinds, format_replay_result, format_verdict

__all__ = [
    "format_kinds",
    "format_replay_result",
    "format_verdict",
]
