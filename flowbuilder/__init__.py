"""flowbuilder: graph model and editing protocol for input → LLM → output workflows."""

from .config import EditorSettings, load_settings
from .editor.session import WorkflowEditor
from .registry.kinds import NodeKind, schema_for
from .validators.connection import validate_connection

__all__ = [
    "EditorSettings",
    "load_settings",
    "WorkflowEditor",
    "NodeKind",
    "schema_for",
    "validate_connection",
]
