"""Pydantic models for editor event scripts."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, Field

from ..config import EditorSettings

EVENT_TYPES = ("drop", "connect", "set_field", "wait", "run", "deploy")


class DropEvent(BaseModel):
    """A palette entry dropped at a pointer coordinate."""

    type: Literal["drop"] = "drop"
    kind: str | None = None
    x: float = 0
    y: float = 0


class ConnectEvent(BaseModel):
    """A connection drawn between two node handles."""

    type: Literal["connect"] = "connect"
    source: str
    target: str
    source_handle: str | None = None
    target_handle: str | None = None


class SetFieldEvent(BaseModel):
    """A field widget emitting a new value."""

    type: Literal["set_field"] = "set_field"
    node: str
    field: str
    value: Any = None


class WaitEvent(BaseModel):
    """Time passing between gestures."""

    type: Literal["wait"] = "wait"
    seconds: float = Field(ge=0)


class RunEvent(BaseModel):
    type: Literal["run"] = "run"


class DeployEvent(BaseModel):
    type: Literal["deploy"] = "deploy"


Event = Annotated[
    Union[DropEvent, ConnectEvent, SetFieldEvent, WaitEvent, RunEvent, DeployEvent],
    Field(discriminator="type"),
]

_OPTION_EXAMPLES = {
    "drop": "drop: {kind: input, x: 100, y: 50}",
    "connect": "connect: {source: input-1, target: llm-2}",
    "set_field": "set_field: {node: llm-2, field: model, value: gpt-4}",
}


def _normalize_event(item: Any) -> Any:
    """Expand shorthand event syntax to an explicit ``type`` mapping.

    Accepted forms::

        - run                      # bare name
        - wait: 3                  # scalar body
        - drop: {kind: input}      # single-key mapping
        - {type: drop, kind: llm}  # explicit
    """
    if isinstance(item, str):
        name, body = item, None
    elif isinstance(item, dict) and "type" not in item:
        if len(item) != 1:
            raise ValueError(
                f"expected a single event name per entry, got {', '.join(map(str, item))}"
            )
        ((name, body),) = item.items()
    else:
        return item

    if name not in EVENT_TYPES:
        raise ValueError(f"unknown event '{name}', expected one of: {', '.join(EVENT_TYPES)}")

    if body is None:
        return {"type": name}
    if isinstance(body, dict):
        return {"type": name, **body}
    if name == "wait":
        return {"type": name, "seconds": body}
    if name in _OPTION_EXAMPLES:
        raise ValueError(
            f"'{name}' takes a mapping of options such as `{_OPTION_EXAMPLES[name]}`, "
            f"got {body!r}"
        )
    raise ValueError(f"'{name}' takes no options, got {body!r}")


ScriptEvent = Annotated[Event, BeforeValidator(_normalize_event)]


class EventScript(BaseModel):
    """Root model for an event script file.

    Each entry of ``events`` may use the shorthand forms accepted by
    ``_normalize_event``.
    """

    name: str = ""
    description: str | None = None
    settings: EditorSettings | None = None
    events: list[ScriptEvent] = Field(default_factory=list)
