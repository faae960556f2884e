"""Graph layer holding workflow nodes and edges in a networkx graph."""

from .errors import DuplicateNodeError, GraphError, UnknownNodeError
from .models import ChangeHandler, Edge, Node, Position
from .store import GraphStore

__all__ = [
    "DuplicateNodeError",
    "GraphError",
    "UnknownNodeError",
    "ChangeHandler",
    "Edge",
    "Node",
    "Position",
    "GraphStore",
]
