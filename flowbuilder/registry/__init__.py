"""Node registry: the fixed node kinds and their field schemas."""

from .errors import UnknownKindError
from .fields import FieldDefinition, FieldType, KindSpec
from .kinds import (
    KIND_SPECS,
    NodeKind,
    default_data,
    get_kind,
    kind_spec,
    palette,
    resolve_kind,
    schema_for,
)

__all__ = [
    "UnknownKindError",
    "FieldDefinition",
    "FieldType",
    "KindSpec",
    "KIND_SPECS",
    "NodeKind",
    "default_data",
    "get_kind",
    "kind_spec",
    "palette",
    "resolve_kind",
    "schema_for",
]
