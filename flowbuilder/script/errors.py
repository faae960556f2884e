"""Errors raised while loading event scripts."""

from dataclasses import dataclass


class ScriptError(Exception):
    """Base class for event script failures."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ScriptLoadError(ScriptError):
    """The script document could not be read or is not a YAML mapping."""


@dataclass(frozen=True)
class ScriptProblem:
    """A single validation failure.

    ``event`` is the 1-based position of the offending entry in ``events``,
    or None when the problem lies outside the event list.
    """

    loc: str
    msg: str
    event: int | None = None

    def __str__(self) -> str:
        return f"{self.loc}: {self.msg}"


class ScriptValidationError(ScriptError):
    """The script parsed as YAML but does not describe valid events."""

    def __init__(self, problems: list[ScriptProblem], path: str | None = None):
        self.problems = problems
        where = f" in {path}" if path else ""
        super().__init__(f"{len(problems)} problem(s){where}", path)
