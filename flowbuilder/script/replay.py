"""Replay of event scripts against a fresh editor session."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ..config import EditorSettings
from ..editor.placement import DRAG_MIME_TYPE
from ..editor.scheduler import VirtualScheduler
from ..editor.session import WorkflowEditor
from .loader import parse_script
from .models import (
    ConnectEvent,
    DeployEvent,
    DropEvent,
    EventScript,
    RunEvent,
    SetFieldEvent,
    WaitEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class ReplayStep:
    """Outcome of replaying a single event."""

    index: int
    event_type: str
    outcome: str
    rejected: bool = False


@dataclass
class ReplayResult:
    """The editor after a replay, plus a log of each step."""

    editor: WorkflowEditor
    name: str = ""
    steps: list[ReplayStep] = field(default_factory=list)

    @property
    def rejections(self) -> list[ReplayStep]:
        """Get the steps whose connection was rejected."""
        return [s for s in self.steps if s.rejected]

    @property
    def has_rejections(self) -> bool:
        return len(self.rejections) > 0


def _apply_drop(editor: WorkflowEditor, event: DropEvent) -> tuple[str, bool]:
    transfer = {} if event.kind is None else {DRAG_MIME_TYPE: event.kind}
    node = editor.drop(transfer, event.x, event.y)
    if node is None:
        return f"ignored drop of {event.kind!r}", False
    return f"placed {node.id} at ({node.position.x:g}, {node.position.y:g})", False


def _apply_connect(editor: WorkflowEditor, event: ConnectEvent) -> tuple[str, bool]:
    edge = editor.connect(event.source, event.target, event.source_handle, event.target_handle)
    if edge is None:
        reason = editor.notifications.current.message if editor.notifications.current else ""
        return f"rejected {event.source} -> {event.target}: {reason}", True
    return f"connected {edge.source} -> {edge.target}", False


def _apply_set_field(editor: WorkflowEditor, event: SetFieldEvent) -> tuple[str, bool]:
    editor.set_field(event.node, event.field, event.value)
    return f"set {event.node}.{event.field}", False


def _apply_wait(editor: WorkflowEditor, event: WaitEvent) -> tuple[str, bool]:
    fired = editor.scheduler.advance(event.seconds)
    return f"waited {event.seconds:g}s ({fired} timer(s) fired)", False


def _apply_run(editor: WorkflowEditor, event: RunEvent) -> tuple[str, bool]:
    return f"notified: {editor.run().message}", False


def _apply_deploy(editor: WorkflowEditor, event: DeployEvent) -> tuple[str, bool]:
    return f"notified: {editor.deploy().message}", False


_HANDLERS: dict[str, Callable] = {
    "drop": _apply_drop,
    "connect": _apply_connect,
    "set_field": _apply_set_field,
    "wait": _apply_wait,
    "run": _apply_run,
    "deploy": _apply_deploy,
}


def replay_script(
    script: EventScript, settings: EditorSettings | None = None
) -> ReplayResult:
    """Replay every event of a script against a new editor.

    Time only passes on ``wait`` events, using a virtual clock.

    Args:
        script: The parsed script.
        settings: Overrides the script's own settings block when given.

    Returns:
        ReplayResult holding the final editor state and the step log.
    """
    editor = WorkflowEditor(
        settings=settings or script.settings,
        scheduler=VirtualScheduler(),
    )
    result = ReplayResult(editor=editor, name=script.name)

    for index, event in enumerate(script.events, start=1):
        outcome, rejected = _HANDLERS[event.type](editor, event)
        logger.debug("Step %d (%s): %s", index, event.type, outcome)
        result.steps.append(
            ReplayStep(index=index, event_type=event.type, outcome=outcome, rejected=rejected)
        )

    return result


def replay_file(
    path: str | Path, settings: EditorSettings | None = None
) -> ReplayResult:
    """Load and replay a script file.

    Raises:
        ScriptLoadError: If the file cannot be loaded.
        ScriptValidationError: If the script fails validation.
    """
    return replay_script(parse_script(path), settings)
