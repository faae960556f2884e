"""Registry-related exceptions."""


class UnknownKindError(Exception):
    """Raised when a value does not name one of the registered node kinds."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"Unknown node kind: {kind!r}")
