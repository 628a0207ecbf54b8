from dataclasses import dataclass


@dataclass(frozen=True)
class AckDTO:
    """Result of a fire-and-forget call; only the status is kept."""
    status: int
