"""Frame time tracking."""

from __future__ import annotations

from dataclasses import dataclass

MS_PER_SEC = 1000
MICRO_PER_MS = 1000
MICRO_PER_SEC = 1_000_000

SEC_PER_MS = 0.001
MS_PER_MICRO = 0.001
SEC_PER_MICRO = 0.000001


@dataclass
class Delta:
    """Time elapsed between frames, in seconds, scaled by a multiplier."""

    original: float = 0.0
    delta: float = 0.0
    multiplier: float = 1.0
    total_elapsed: float = 0.0

    def update(self, elapsed_microseconds: float) -> float:
        """Record a new frame time and return the scaled delta in seconds."""
        self.original = elapsed_microseconds * SEC_PER_MICRO
        self.delta = self.original * self.multiplier
        self.total_elapsed += self.delta
        return self.delta


def create_delta(default_multiplier: float) -> Delta:
    """Create a zeroed delta with the given multiplier."""
    return Delta(multiplier=default_multiplier)