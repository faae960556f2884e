"""Verdict types returned by connection validation."""

from dataclasses import dataclass
from typing import ClassVar, Union

from ..registry.kinds import NodeKind


@dataclass(frozen=True)
class Allow:
    """The proposed edge is legal."""

    allowed: ClassVar[bool] = True

    def __str__(self) -> str:
        return "ALLOW"


@dataclass(frozen=True)
class Reject:
    """The proposed edge is illegal, with a user-facing reason."""

    reason: str
    allowed: ClassVar[bool] = False

    def __str__(self) -> str:
        return f"REJECT - {self.reason}"


Verdict = Union[Allow, Reject]


@dataclass(frozen=True)
class ConnectionRule:
    """Edges leaving ``source`` must end at ``required_target``."""

    source: NodeKind
    required_target: NodeKind
    message: str

    def check(self, source: NodeKind, target: NodeKind) -> Reject | None:
        """Get the rejection this rule produces for an edge, if any."""
        if source == self.source and target != self.required_target:
            return Reject(self.message)
        return None
