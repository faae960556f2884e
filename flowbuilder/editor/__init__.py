"""Editor layer: placement, field edits, notifications and the session."""

from .field_edit import set_field
from .notifications import Notification, NotificationCenter, NotificationType
from .placement import DRAG_MIME_TYPE, canvas_position, decode_drop, drag_payload, place
from .scheduler import AsyncioScheduler, Scheduler, VirtualScheduler
from .session import DEPLOY_MESSAGE, RUN_MESSAGE, WorkflowEditor
from .views import FieldView, NodeView, describe_node, display_value

__all__ = [
    "set_field",
    "Notification",
    "NotificationCenter",
    "NotificationType",
    "DRAG_MIME_TYPE",
    "canvas_position",
    "decode_drop",
    "drag_payload",
    "place",
    "AsyncioScheduler",
    "Scheduler",
    "VirtualScheduler",
    "DEPLOY_MESSAGE",
    "RUN_MESSAGE",
    "WorkflowEditor",
    "FieldView",
    "NodeView",
    "describe_node",
    "display_value",
]
