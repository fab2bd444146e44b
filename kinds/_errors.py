from __future__ import annotations


class ConsumedError(RuntimeError):
    """A once-only value (callable or lazy node) was used a second time."""

    what: str

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"{what} was already consumed")


class MissingInstanceError(TypeError):
    """No kind (or no capability on the kind) for the requested operation."""

    subject: object
    capability: str

    def __init__(self, subject: object, capability: str) -> None:
        self.subject = subject
        self.capability = capability
        name = subject.__name__ if isinstance(subject, type) else type(subject).__name__
        super().__init__(f"{name} has no {capability} instance")


class CapacityError(ValueError):
    """Fixed-capacity container would exceed its capacity."""

    capacity: int

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"capacity of {capacity} exceeded")


class CombinatorialLimitError(ValueError):
    """Multi-outcome traversal produced more outcomes than allowed."""

    limit: int
    outcomes: int

    def __init__(self, limit: int, outcomes: int) -> None:
        self.limit = limit
        self.outcomes = outcomes
        super().__init__(f"traversal produced {outcomes} outcomes (limit {limit})")


__all__ = (
    "CapacityError",
    "CombinatorialLimitError",
    "ConsumedError",
    "MissingInstanceError",
)
