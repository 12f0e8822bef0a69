"""Statistics tracking for Neon Pong."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List

from game import Side, StepResult


@dataclass
class PointStats:
    """Statistics for a single point."""

    point_num: int
    scorer: Side
    rally_hits: int  # Paddle hits before the point ended
    frames: int


class StatsTracker:
    """Tracks rallies and points across a match.

    Fed with step results, so the same numbers come out of headless runs
    and the windowed game.
    """

    def __init__(self, max_history: int = 200):
        self.max_history = max_history

        self.frame_count = 0
        self.total_hits = 0
        self.wall_bounces = 0
        self.longest_rally = 0

        # Current point tracking
        self.current_rally = 0
        self.current_frames = 0

        self.points: Deque[PointStats] = deque(maxlen=max_history)
        self.points_played = 0

    def record(self, result: StepResult) -> None:
        """Account for one simulation step."""
        self.frame_count += 1
        self.current_frames += 1

        hits = int(result.player_hit) + int(result.computer_hit)
        self.total_hits += hits
        self.current_rally += hits
        if result.wall_bounce:
            self.wall_bounces += 1

        if result.scorer is not None:
            self.end_point(result.scorer)

    def end_point(self, scorer: Side) -> None:
        self.points_played += 1
        self.points.append(
            PointStats(
                point_num=self.points_played,
                scorer=scorer,
                rally_hits=self.current_rally,
                frames=self.current_frames,
            )
        )
        self.longest_rally = max(self.longest_rally, self.current_rally)
        self.current_rally = 0
        self.current_frames = 0

    def recent_rallies(self, n: int = 10) -> List[int]:
        return [p.rally_hits for p in list(self.points)[-n:]]

    @property
    def average_rally(self) -> float:
        if not self.points:
            return 0.0
        return sum(p.rally_hits for p in self.points) / len(self.points)

    def reset(self) -> None:
        """Forget everything, e.g. when the match restarts."""
        self.frame_count = 0
        self.total_hits = 0
        self.wall_bounces = 0
        self.longest_rally = 0
        self.current_rally = 0
        self.current_frames = 0
        self.points.clear()
        self.points_played = 0
