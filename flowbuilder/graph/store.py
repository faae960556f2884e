"""GraphStore wrapper around networkx for workflow graphs."""

import logging
from typing import Iterator

import networkx as nx

from ..registry.kinds import NodeKind
from .errors import DuplicateNodeError, UnknownNodeError
from .models import Edge, Node

logger = logging.getLogger(__name__)


class GraphStore:
    """The single owner of a workflow's nodes and edges.

    Wraps a networkx MultiDiGraph keyed by node id. Each graph node carries
    its ``Node`` value under the ``node`` attribute and each graph edge its
    ``Edge`` value under ``edge``, so replacing one node never touches the
    objects held for the others. Parallel edges are allowed.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._graph = nx.MultiDiGraph()
        self._placements = 0
        self._edge_seq = 0

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    @property
    def placements(self) -> int:
        """Number of nodes ever added; never decreases."""
        return self._placements

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, node_id: object) -> bool:
        return self._graph.has_node(node_id)

    # -------------------------------------------------------------------------
    # Node management
    # -------------------------------------------------------------------------

    def next_node_id(self, kind: NodeKind) -> str:
        """Get the id the next placed node of ``kind`` will receive.

        The ordinal counts placements of every kind, not just ``kind``, and
        steps past any id already present in the store.
        """
        ordinal = self._placements + 1
        while self._graph.has_node(f"{kind.value}-{ordinal}"):
            ordinal += 1
        return f"{kind.value}-{ordinal}"

    def add_node(self, node: Node) -> Node:
        """Append a node to the store.

        Args:
            node: The node to add.

        Returns:
            The stored node.

        Raises:
            DuplicateNodeError: If a node with the same id already exists.
        """
        if self._graph.has_node(node.id):
            raise DuplicateNodeError(node.id)

        self._graph.add_node(node.id, node=node)
        self._placements += 1
        logger.debug("Added node %s at (%s, %s)", node.id, node.position.x, node.position.y)
        return node

    def replace_node(self, node: Node) -> None:
        """Swap the stored value of an existing node.

        Raises:
            UnknownNodeError: If no node with that id exists.
        """
        if not self._graph.has_node(node.id):
            raise UnknownNodeError(node.id)
        self._graph.nodes[node.id]["node"] = node

    def get_node(self, node_id: str) -> Node | None:
        """Get a node by id."""
        if self._graph.has_node(node_id):
            return self._graph.nodes[node_id]["node"]
        return None

    def kind_of(self, node_id: str) -> NodeKind | None:
        """Get the kind of a node, or None if the id is unknown."""
        node = self.get_node(node_id)
        return node.kind if node is not None else None

    @property
    def nodes(self) -> list[Node]:
        """Get all nodes in insertion order."""
        return [data["node"] for _, data in self._graph.nodes(data=True)]

    def get_nodes_of_kind(self, kind: NodeKind) -> list[Node]:
        """Get all nodes of one kind in insertion order."""
        return [node for node in self.nodes if node.kind == kind]

    # -------------------------------------------------------------------------
    # Edge management
    # -------------------------------------------------------------------------

    def add_edge(
        self,
        source: str,
        target: str,
        source_handle: str | None = None,
        target_handle: str | None = None,
    ) -> Edge:
        """Append an edge between two existing nodes.

        No legality check happens here; callers validate first.

        Raises:
            UnknownNodeError: If either endpoint is not in the store.
        """
        for node_id in (source, target):
            if not self._graph.has_node(node_id):
                raise UnknownNodeError(node_id)

        self._edge_seq += 1
        edge = Edge(
            id=f"edge-{source}-{target}-{self._edge_seq}",
            source=source,
            target=target,
            source_handle=source_handle,
            target_handle=target_handle,
        )
        self._graph.add_edge(source, target, key=edge.id, edge=edge, seq=self._edge_seq)
        logger.debug("Added edge %s", edge.id)
        return edge

    def _iter_edges(self, edge_view) -> Iterator[Edge]:
        ordered = sorted(edge_view, key=lambda item: item[2]["seq"])
        for _, _, data in ordered:
            yield data["edge"]

    @property
    def edges(self) -> list[Edge]:
        """Get all edges in insertion order."""
        return list(self._iter_edges(self._graph.edges(data=True)))

    def get_edges_from(self, node_id: str) -> list[Edge]:
        """Get all edges originating from a node."""
        if not self._graph.has_node(node_id):
            return []
        return list(self._iter_edges(self._graph.out_edges(node_id, data=True)))

    def get_edges_to(self, node_id: str) -> list[Edge]:
        """Get all edges pointing to a node."""
        if not self._graph.has_node(node_id):
            return []
        return list(self._iter_edges(self._graph.in_edges(node_id, data=True)))
