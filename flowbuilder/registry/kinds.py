"""Node kinds and their registered field schemas."""

from enum import Enum
from typing import Any

from .errors import UnknownKindError
from .fields import FieldDefinition, FieldType, KindSpec


class NodeKind(str, Enum):
    """The pipeline stages a node can represent.

    Values double as drag payload identifiers and node id prefixes.
    """

    INPUT = "input"
    LLM_ENGINE = "llm"
    OUTPUT = "output"


KIND_SPECS: dict[NodeKind, KindSpec] = {
    NodeKind.INPUT: KindSpec(
        title="INPUT",
        label="Input",
        description="Write the input question you want to ask",
        fields=(
            FieldDefinition(
                name="query",
                type=FieldType.TEXT,
                default="",
                label="Input",
                placeholder="What is the definition of science?",
                multiline=True,
            ),
        ),
    ),
    NodeKind.LLM_ENGINE: KindSpec(
        title="LLM ENGINE",
        label="LLM Engine",
        fields=(
            FieldDefinition(
                name="model",
                type=FieldType.ENUM,
                default="gpt-3.5",
                label="Model Name",
                options=("gpt-3.5", "gpt-4"),
            ),
            FieldDefinition(
                name="apiBase",
                type=FieldType.TEXT,
                default="",
                label="OpenAI API Base",
                placeholder="https://api.openai.com/v1",
            ),
            FieldDefinition(
                name="apiKey",
                type=FieldType.SECRET,
                default="",
                label="OpenAI Key",
                placeholder="Enter your OpenAI API key",
            ),
            FieldDefinition(
                name="maxTokens",
                type=FieldType.INTEGER,
                default=2000,
                label="Max Tokens",
                placeholder="2000",
            ),
            FieldDefinition(
                name="temperature",
                type=FieldType.FLOAT,
                default=0.5,
                label="Temperature",
                placeholder="0.5",
                minimum=0,
                maximum=1,
                step=0.1,
            ),
        ),
    ),
    NodeKind.OUTPUT: KindSpec(
        title="OUTPUT",
        label="Output",
        fields=(
            FieldDefinition(
                name="output",
                type=FieldType.READONLY,
                default="Output will appear here...",
                label="Output Response",
            ),
        ),
    ),
}


def resolve_kind(value: object) -> NodeKind | None:
    """Decode a kind identifier without raising.

    Args:
        value: A NodeKind or its string identifier (e.g. a drag payload).

    Returns:
        The matching NodeKind, or None if the value names no kind.
    """
    if isinstance(value, NodeKind):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return NodeKind(value)
    except ValueError:
        return None


def get_kind(value: object) -> NodeKind:
    """Coerce a value to a NodeKind.

    Raises:
        UnknownKindError: If the value names no registered kind.
    """
    kind = resolve_kind(value)
    if kind is None:
        raise UnknownKindError(value)
    return kind


def kind_spec(kind: NodeKind | str) -> KindSpec:
    """Get the full registration of a node kind.

    Raises:
        UnknownKindError: If the kind is not registered.
    """
    return KIND_SPECS[get_kind(kind)]


def schema_for(kind: NodeKind | str) -> list[FieldDefinition]:
    """Get the ordered field definitions of a node kind.

    Args:
        kind: A NodeKind or its string identifier.

    Returns:
        The field definitions, in display order.

    Raises:
        UnknownKindError: If the kind is not registered.
    """
    return list(kind_spec(kind).fields)


def default_data(kind: NodeKind | str) -> dict[str, Any]:
    """Build a fresh data mapping seeded from a kind's field defaults."""
    return {field.name: field.default for field in schema_for(kind)}


def palette() -> list[tuple[NodeKind, str]]:
    """Get the drag sources offered to the user, in display order."""
    return [(kind, spec.label) for kind, spec in KIND_SPECS.items()]
