"""Connection validator deciding which node kinds may be wired together."""

from ..registry.kinds import NodeKind, get_kind
from .base import Allow, ConnectionRule, Verdict

# Checked in order; the first rule that fires wins.
CONNECTION_RULES: tuple[ConnectionRule, ...] = (
    ConnectionRule(
        source=NodeKind.INPUT,
        required_target=NodeKind.LLM_ENGINE,
        message="Input nodes can only connect to LLM nodes",
    ),
    ConnectionRule(
        source=NodeKind.LLM_ENGINE,
        required_target=NodeKind.OUTPUT,
        message="LLM nodes can only connect to Output nodes",
    ),
)


def validate_connection(
    source_kind: NodeKind | str, target_kind: NodeKind | str
) -> Verdict:
    """Decide whether an edge from one node kind to another is legal.

    Only edges leaving Input or LLM Engine nodes are restricted. An edge
    leaving an Output node is allowed whatever its target.

    Args:
        source_kind: Kind of the edge's source node.
        target_kind: Kind of the edge's target node.

    Returns:
        Allow, or Reject carrying the message to show the user.

    Raises:
        UnknownKindError: If either argument names no registered kind.
    """
    source = get_kind(source_kind)
    target = get_kind(target_kind)

    for rule in CONNECTION_RULES:
        rejection = rule.check(source, target)
        if rejection is not None:
            return rejection

    return Allow()


def connection_matrix() -> list[tuple[NodeKind, NodeKind, Verdict]]:
    """Evaluate every ordered pair of node kinds.

    Returns:
        Tuples of (source, target, verdict) in registry order.
    """
    return [
        (source, target, validate_connection(source, target))
        for source in NodeKind
        for target in NodeKind
    ]
