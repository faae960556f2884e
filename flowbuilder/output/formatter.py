"""Output formatting for CLI reports."""

import json
from typing import Any, Literal

from ..editor.notifications import Notification, NotificationType
from ..graph.models import Node
from ..registry.fields import FieldType
from ..registry.kinds import KIND_SPECS, kind_spec
from ..script.replay import ReplayResult
from ..validators.base import Verdict
from ..validators.connection import connection_matrix

SECRET_MASK = "********"

OutputFormat = Literal["text", "json"]


def _masked_data(node: Node) -> dict[str, Any]:
    """Get a node's data with secret values hidden."""
    spec = kind_spec(node.kind)
    data = {}
    for name, value in node.data.items():
        definition = spec.get_field(name)
        if definition is not None and definition.type == FieldType.SECRET and value:
            data[name] = SECRET_MASK
        else:
            data[name] = value
    return data


def _notification_symbol(notification: Notification) -> str:
    return "✔" if notification.type == NotificationType.SUCCESS else "✘"


def format_replay_result(
    result: ReplayResult,
    format: OutputFormat = "text",
) -> str:
    """Format a replayed session for output.

    Args:
        result: The replay result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_replay_json(result)
    return _format_replay_text(result)


def _format_replay_text(result: ReplayResult) -> str:
    """Format a replay as human-readable text."""
    editor = result.editor
    lines: list[str] = []

    if result.name:
        lines.append(f"SCRIPT: {result.name}")
        lines.append("")

    lines.append("STEPS:")
    if result.steps:
        for step in result.steps:
            marker = "✘" if step.rejected else " "
            lines.append(f"  {marker} {step.index}. {step.event_type}: {step.outcome}")
    else:
        lines.append("  (none)")

    lines.append("")
    lines.append("NODES:")
    if editor.nodes:
        for node in editor.nodes:
            lines.append(
                f"  {node.id} [{kind_spec(node.kind).title}] at "
                f"({node.position.x:g}, {node.position.y:g})"
            )
            for name, value in _masked_data(node).items():
                lines.append(f"    {name}: {value!r}")
    else:
        lines.append("  (none)")

    lines.append("")
    lines.append("EDGES:")
    if editor.edges:
        for edge in editor.edges:
            lines.append(f"  {edge.source} -> {edge.target}")
    else:
        lines.append("  (none)")

    lines.append("")
    lines.append("NOTIFICATIONS:")
    history = editor.notifications.history
    if history:
        for notification in history:
            lines.append(f"  {_notification_symbol(notification)} {notification.message}")
    else:
        lines.append("  (none)")

    current = editor.notifications.current
    lines.append("")
    lines.append(f"Displayed: {current.message if current else '(none)'}")
    lines.append(
        f"{len(editor.nodes)} node(s), {len(editor.edges)} edge(s), "
        f"{len(result.rejections)} rejected connection(s)"
    )

    return "\n".join(lines)


def _format_replay_json(result: ReplayResult) -> str:
    """Format a replay as JSON."""
    editor = result.editor
    current = editor.notifications.current
    data = {
        "name": result.name,
        "steps": [
            {
                "index": step.index,
                "type": step.event_type,
                "outcome": step.outcome,
                "rejected": step.rejected,
            }
            for step in result.steps
        ],
        "nodes": [
            {**node.model_dump(mode="json"), "data": _masked_data(node)}
            for node in editor.nodes
        ],
        "edges": [edge.model_dump(mode="json") for edge in editor.edges],
        "notifications": [n.to_dict() for n in editor.notifications.history],
        "displayed": current.to_dict() if current else None,
        "rejected_count": len(result.rejections),
    }
    return json.dumps(data, indent=2)


def format_kinds(format: OutputFormat = "text") -> str:
    """Format the node palette, field schemas and connection rules."""
    matrix = connection_matrix()

    if format == "json":
        data = {
            "kinds": [
                {
                    "kind": kind.value,
                    **spec.model_dump(mode="json"),
                }
                for kind, spec in KIND_SPECS.items()
            ],
            "connections": [
                {
                    "source": source.value,
                    "target": target.value,
                    "allowed": verdict.allowed,
                    "reason": getattr(verdict, "reason", None),
                }
                for source, target, verdict in matrix
            ],
        }
        return json.dumps(data, indent=2)

    lines: list[str] = []
    for kind, spec in KIND_SPECS.items():
        lines.append(f"{spec.label} ({kind.value}) - {spec.title}")
        for definition in spec.fields:
            extras = []
            if definition.options:
                extras.append("options: " + ", ".join(definition.options))
            if definition.minimum is not None or definition.maximum is not None:
                extras.append(f"range: [{definition.minimum}, {definition.maximum}]")
            suffix = f" ({'; '.join(extras)})" if extras else ""
            lines.append(
                f"  {definition.name}: {definition.type.value} = {definition.default!r}{suffix}"
            )
        lines.append("")

    lines.append("CONNECTIONS:")
    for source, target, verdict in matrix:
        lines.append(f"  {source.value} -> {target.value}: {format_verdict(verdict)}")

    return "\n".join(lines)


def format_verdict(verdict: Verdict) -> str:
    """Format a connection verdict as a single line."""
    return str(verdict)
