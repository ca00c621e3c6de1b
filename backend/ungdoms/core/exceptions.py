"""Domain exceptions raised by the store and repositories.

Not-found is never an exception here: repositories return ``None``/``False``
and the HTTP layer turns that into a 404.
"""


class StoreError(RuntimeError):
    """Backing JSON document could not be read or written."""


class StoreWriteError(StoreError):
    """Flushing the in-memory state to disk failed.

    The mutation that triggered the flush has been rolled back in memory.
    """


class VersionConflictError(RuntimeError):
    """Caller's expected version does not match the stored record."""

    def __init__(self, entity: str, entity_id: str, expected: int, actual: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{entity} {entity_id} is at version {actual}, expected {expected}"
        )


class InvalidStatusTransitionError(ValueError):
    """Backward workflow status move while transitions are enforced."""

    def __init__(self, entity: str, current: str, requested: str) -> None:
        self.entity = entity
        self.current = current
        self.requested = requested
        super().__init__(f"{entity} status cannot move from {current} to {requested}")
