"""Event scripts: YAML sequences of editor gestures and their replay."""

from .errors import ScriptError, ScriptLoadError, ScriptProblem, ScriptValidationError
from .loader import parse_script, parse_script_from_string
from .models import (
    ConnectEvent,
    DeployEvent,
    DropEvent,
    Event,
    EventScript,
    RunEvent,
    SetFieldEvent,
    WaitEvent,
)
from .replay import ReplayResult, ReplayStep, replay_file, replay_script

__all__ = [
    "ScriptError",
    "ScriptLoadError",
    "ScriptProblem",
    "ScriptValidationError",
    "parse_script",
    "parse_script_from_string",
    "ConnectEvent",
    "DeployEvent",
    "DropEvent",
    "Event",
    "EventScript",
    "RunEvent",
    "SetFieldEvent",
    "WaitEvent",
    "ReplayResult",
    "ReplayStep",
    "replay_file",
    "replay_script",
]
