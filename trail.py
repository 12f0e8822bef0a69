"""Ball trail history for Neon Pong."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator


@dataclass(frozen=True)
class TrailSample:
    """A snapshot of the ball used to draw one afterimage."""

    x: float
    y: float
    hue: float


class BallTrail:
    """
    Fixed-capacity FIFO of recent ball snapshots.

    Samples iterate oldest first. Pushing beyond capacity evicts the
    oldest sample.
    """

    def __init__(self, capacity: int = 15):
        if capacity < 1:
            raise ValueError(f"trail capacity must be positive, got {capacity}")
        self._samples: Deque[TrailSample] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._samples.maxlen

    def push(self, x: float, y: float, hue: float) -> None:
        """Record a new sample, dropping the oldest when full."""
        self._samples.append(TrailSample(x, y, hue))

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[TrailSample]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> TrailSample:
        return self._samples[index]

    @property
    def newest(self) -> TrailSample:
        """The most recently pushed sample."""
        if not self._samples:
            raise IndexError("trail is empty")
        return self._samples[-1]
