"""Schema-driven view models for rendering nodes."""

from dataclasses import dataclass, field
from typing import Any

from ..graph.models import Node
from ..registry.kinds import kind_spec


@dataclass
class FieldView:
    """Everything a form widget needs to render one field."""

    name: str
    label: str
    input_type: str
    value: Any
    placeholder: str | None = None
    options: list[str] = field(default_factory=list)
    minimum: int | float | None = None
    maximum: int | float | None = None
    step: int | float | None = None
    multiline: bool = False
    read_only: bool = False


@dataclass
class NodeView:
    """A rendered node: its header and one view per declared field."""

    node_id: str
    kind: str
    title: str
    description: str | None
    fields: list[FieldView] = field(default_factory=list)


def display_value(node: Node, name: str) -> Any:
    """Get the value a widget shows for a field.

    Falls back to the field's default whenever the stored value is empty
    or falsy (an emptied number box shows the default again).
    """
    spec = kind_spec(node.kind)
    definition = spec.get_field(name)
    default = definition.default if definition is not None else None
    return node.data.get(name) or default


def describe_node(node: Node) -> NodeView:
    """Build the view model of a node from its kind's schema."""
    spec = kind_spec(node.kind)
    return NodeView(
        node_id=node.id,
        kind=node.kind.value,
        title=spec.title,
        description=spec.description,
        fields=[
            FieldView(
                name=definition.name,
                label=definition.label,
                input_type=definition.input_type,
                value=display_value(node, definition.name),
                placeholder=definition.placeholder,
                options=list(definition.options),
                minimum=definition.minimum,
                maximum=definition.maximum,
                step=definition.step,
                multiline=definition.multiline,
                read_only=definition.read_only,
            )
            for definition in spec.fields
        ],
    )
