"""Editor session wiring user gestures to the workflow graph."""

import logging
from typing import Any, Mapping

from ..config import EditorSettings
from ..graph.models import Edge, Node, Position
from ..graph.store import GraphStore
from ..registry.kinds import NodeKind
from ..validators.base import Reject
from ..validators.connection import validate_connection
from . import field_edit, placement
from .notifications import Notification, NotificationCenter
from .scheduler import Scheduler, VirtualScheduler

logger = logging.getLogger(__name__)

RUN_MESSAGE = "Flow ran successfully"
DEPLOY_MESSAGE = "Your workflow is ready to be deployed"


class WorkflowEditor:
    """One editing session over a workflow graph.

    The rendering layer calls into this object for every gesture: drops
    from the palette, connections drawn between node handles, field
    edits, and the Run and Deploy actions. All calls run synchronously.
    """

    def __init__(
        self,
        settings: EditorSettings | None = None,
        scheduler: Scheduler | None = None,
    ):
        """Initialize an editor with an empty graph.

        Args:
            settings: Editor settings. Defaults are used if not provided.
            scheduler: Runs notification timers. A VirtualScheduler is
                created if not provided.
        """
        self.settings = settings or EditorSettings()
        self.scheduler = scheduler if scheduler is not None else VirtualScheduler()
        self.store = GraphStore()
        self.notifications = NotificationCenter(
            self.scheduler,
            delay=self.settings.notification_delay,
            clear_policy=self.settings.clear_policy,
        )

    @property
    def nodes(self) -> list[Node]:
        return self.store.nodes

    @property
    def edges(self) -> list[Edge]:
        return self.store.edges

    # -------------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------------

    def place(self, kind: NodeKind | str, position: Position) -> Node:
        """Place a node directly at a canvas position."""
        return placement.place(self.store, kind, position, on_change=self.set_field)

    def drag_start(self, kind: NodeKind | str) -> dict[str, str]:
        """Build the payload for a drag starting on a palette entry."""
        return placement.drag_payload(kind)

    def drop(
        self, transfer: Mapping[str, str], client_x: float, client_y: float
    ) -> Node | None:
        """Handle a drop on the canvas.

        Args:
            transfer: The drag payload.
            client_x: Pointer x coordinate.
            client_y: Pointer y coordinate.

        Returns:
            The placed node, or None if the payload named no known kind.
        """
        kind = placement.decode_drop(transfer)
        if kind is None:
            return None

        offset = (self.settings.drop_offset_x, self.settings.drop_offset_y)
        position = placement.canvas_position(client_x, client_y, offset)
        return self.place(kind, position)

    # -------------------------------------------------------------------------
    # Connections
    # -------------------------------------------------------------------------

    def connect(
        self,
        source: str,
        target: str,
        source_handle: str | None = None,
        target_handle: str | None = None,
    ) -> Edge | None:
        """Handle a connection drawn from one node to another.

        The edge is only added if the connection validator allows it;
        otherwise an error notification carries the reason.

        Returns:
            The new edge, or None if the connection was rejected.
        """
        for node_id in (source, target):
            if node_id not in self.store:
                self.notifications.error(f"Cannot connect unknown node '{node_id}'")
                logger.info("Rejected connection %s -> %s: unknown node %s", source, target, node_id)
                return None

        verdict = validate_connection(self.store.kind_of(source), self.store.kind_of(target))
        if isinstance(verdict, Reject):
            self.notifications.error(verdict.reason)
            logger.info("Rejected connection %s -> %s: %s", source, target, verdict.reason)
            return None

        return self.store.add_edge(source, target, source_handle, target_handle)

    # -------------------------------------------------------------------------
    # Field edits
    # -------------------------------------------------------------------------

    def set_field(self, node_id: str, field_name: str, value: Any) -> None:
        """Apply an edit emitted by a node's field widget."""
        field_edit.set_field(self.store, node_id, field_name, value)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def run(self) -> Notification:
        """Handle the Run action. The graph is not executed."""
        return self.notifications.success(RUN_MESSAGE)

    def deploy(self) -> Notification:
        """Handle the Deploy action."""
        return self.notifications.success(DEPLOY_MESSAGE)
