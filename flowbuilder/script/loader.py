"""Parsing event scripts from YAML files and strings."""

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..yamlfile import YamlFileError, parse_mapping, read_mapping
from .errors import ScriptLoadError, ScriptProblem, ScriptValidationError
from .models import EventScript


def parse_script(path: str | Path) -> EventScript:
    """Read and validate an event script file.

    Raises:
        ScriptLoadError: If the file cannot be read or is not a YAML mapping.
        ScriptValidationError: If the events or settings are invalid.
    """
    try:
        data = read_mapping(path)
    except YamlFileError as e:
        raise ScriptLoadError(str(e), e.path) from e
    return _validate(data, str(path))


def parse_script_from_string(text: str) -> EventScript:
    """Validate an event script given as YAML text.

    Raises:
        ScriptLoadError: If the text is not a YAML mapping.
        ScriptValidationError: If the events or settings are invalid.
    """
    try:
        data = parse_mapping(text)
    except YamlFileError as e:
        raise ScriptLoadError(str(e)) from e
    return _validate(data)


def _validate(data: dict[str, Any], path: str | None = None) -> EventScript:
    try:
        return EventScript.model_validate(data)
    except ValidationError as e:
        problems = [_to_problem(err) for err in e.errors()]
        raise ScriptValidationError(problems, path) from e


def _to_problem(err: Any) -> ScriptProblem:
    """Locate a pydantic error by event number rather than list index.

    Event errors arrive as ``("events", index, tag, *field_path)``, where
    ``tag`` is the event type the entry was matched against.
    """
    loc = err["loc"]
    msg = err["msg"]
    cause = err.get("ctx", {}).get("error")
    if err["type"] == "value_error" and cause is not None:
        msg = str(cause)

    if len(loc) >= 2 and loc[0] == "events" and isinstance(loc[1], int):
        event = loc[1] + 1
        where = f"event {event}"
        if len(loc) > 2:
            where += f" ({loc[2]})"
        field_path = ".".join(str(part) for part in loc[3:])
        return ScriptProblem(f"{where}.{field_path}" if field_path else where, msg, event)

    return ScriptProblem(".".join(str(part) for part in loc) or "script", msg)
