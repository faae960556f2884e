"""Routing of field edits from rendered nodes back into the graph store."""

import logging
from typing import Any

from ..graph.store import GraphStore

logger = logging.getLogger(__name__)


def set_field(store: GraphStore, node_id: str, field_name: str, value: Any) -> None:
    """Overwrite one data value of a node.

    The node is replaced by an updated copy; every other node object in
    the store stays the same. ``value`` is stored as given, without
    coercion to the field's semantic type.

    Edits to a node that is not in the store, or to a field the node's
    kind does not declare, are ignored.

    Args:
        store: The graph store holding the node.
        node_id: Id of the node being edited.
        field_name: Name of the field being edited.
        value: The new raw value.
    """
    node = store.get_node(node_id)
    if node is None:
        logger.info("Ignoring edit of '%s' on missing node '%s'", field_name, node_id)
        return

    if field_name not in node.data:
        logger.warning(
            "Ignoring edit of undeclared field '%s' on %s node '%s'",
            field_name,
            node.kind.value,
            node_id,
        )
        return

    store.replace_node(node.with_field(field_name, value))
    logger.debug("Set %s.%s", node_id, field_name)
