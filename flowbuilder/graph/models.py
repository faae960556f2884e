"""Pydantic models for workflow nodes and edges."""

from types import MappingProxyType
from typing import Any, Callable, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from ..registry.kinds import NodeKind, kind_spec

# Signature of the edit callback handed to rendered nodes: (node_id, field, value)
ChangeHandler = Callable[[str, str, Any], None]


class Position(BaseModel):
    """A point in canvas space."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Node(BaseModel):
    """A node placed on the workflow canvas.

    Nodes are immutable; edits produce a new Node via ``with_field``.
    ``data`` is a read-only mapping whose keys are exactly the fields
    declared for ``kind``. ``on_change`` is the wiring handle a rendering
    layer uses to dispatch edits and is left out of any dump.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    kind: NodeKind
    position: Position
    data: Mapping[str, Any]
    on_change: ChangeHandler | None = Field(default=None, exclude=True, repr=False)

    @field_validator("data", mode="after")
    @classmethod
    def _freeze_data(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_data_keys(self) -> "Node":
        declared = set(kind_spec(self.kind).field_names())
        missing = declared - set(self.data)
        extra = set(self.data) - declared
        if missing or extra:
            raise ValueError(
                f"data for {self.kind.value} node '{self.id}' must hold exactly "
                f"{sorted(declared)}; missing {sorted(missing)}, unexpected {sorted(extra)}"
            )
        return self

    @field_serializer("data")
    def _dump_data(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def with_field(self, name: str, value: Any) -> "Node":
        """Return a copy of this node with one declared data value replaced.

        Raises:
            KeyError: If ``name`` is not a field of this node's kind.
        """
        if name not in self.data:
            raise KeyError(name)
        data = MappingProxyType({**self.data, name: value})
        return self.model_copy(update={"data": data})


class Edge(BaseModel):
    """A directed connection between two nodes."""

    model_config = ConfigDict(frozen=True)

    id: str
    source: str
    target: str
    source_handle: str | None = None
    target_handle: str | None = None
