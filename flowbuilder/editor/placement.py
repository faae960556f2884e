"""Placement of new nodes from drag-and-drop gestures."""

import logging
from typing import Mapping

from ..graph.models import ChangeHandler, Node, Position
from ..graph.store import GraphStore
from ..registry.kinds import NodeKind, default_data, get_kind, resolve_kind

logger = logging.getLogger(__name__)

# Drag payload key carrying the kind identifier
DRAG_MIME_TYPE = "application/reactflow"

# Subtracted from pointer coordinates to approximate canvas coordinates
DEFAULT_DROP_OFFSET = (100.0, 50.0)


def place(
    store: GraphStore,
    kind: NodeKind | str,
    position: Position,
    on_change: ChangeHandler | None = None,
) -> Node:
    """Create a node of ``kind`` at ``position`` and append it to the store.

    The node's data is seeded from the kind's field defaults. Its id uses
    the store's placement counter, which counts nodes of every kind, so
    ids are not densely numbered per kind. Positions are not checked.

    Args:
        store: The graph store receiving the node.
        kind: The node kind.
        position: Canvas coordinate of the node.
        on_change: Edit callback wired into the node for rendering.

    Returns:
        The new node.

    Raises:
        UnknownKindError: If ``kind`` is not registered.
    """
    kind = get_kind(kind)
    node = Node(
        id=store.next_node_id(kind),
        kind=kind,
        position=position,
        data=default_data(kind),
        on_change=on_change,
    )
    return store.add_node(node)


def drag_payload(kind: NodeKind | str) -> dict[str, str]:
    """Build the payload a drag source attaches to a drag gesture."""
    return {DRAG_MIME_TYPE: get_kind(kind).value}


def decode_drop(transfer: Mapping[str, str]) -> NodeKind | None:
    """Read the node kind out of a drop payload, or None if there is none."""
    kind = resolve_kind(transfer.get(DRAG_MIME_TYPE))
    if kind is None:
        logger.info("Ignoring drop without a known node kind: %r", dict(transfer))
    return kind


def canvas_position(
    client_x: float,
    client_y: float,
    offset: tuple[float, float] = DEFAULT_DROP_OFFSET,
) -> Position:
    """Translate pointer coordinates into canvas space.

    This subtracts a fixed offset rather than inverting the canvas
    transform, so pan and zoom are not accounted for.
    """
    return Position(x=client_x - offset[0], y=client_y - offset[1])
