"""Graph store exceptions."""


class GraphError(Exception):
    """Base exception for graph store misuse."""

    pass


class DuplicateNodeError(GraphError):
    """Raised when a node id is already present in the store."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' already exists")


class UnknownNodeError(GraphError):
    """Raised when an operation references a node id not in the store."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' does not exist")
