"""Validators deciding which edges may be added to a workflow."""

from .base import Allow, ConnectionRule, Reject, Verdict
from .connection import CONNECTION_RULES, connection_matrix, validate_connection

__all__ = [
    "Allow",
    "ConnectionRule",
    "Reject",
    "Verdict",
    "CONNECTION_RULES",
    "connection_matrix",
    "validate_connection",
]
