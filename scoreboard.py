"""Score display sink for Neon Pong."""

from typing import Protocol, Tuple


class ScoreSink(Protocol):
    """Anything that can show the two scores."""

    def update(self, player_score: int, computer_score: int) -> None:
        ...


class Scoreboard:
    """Holds the last reported scores for display."""

    def __init__(self):
        self.player_score = 0
        self.computer_score = 0
        self.updates = 0

    def update(self, player_score: int, computer_score: int) -> None:
        self.player_score = player_score
        self.computer_score = computer_score
        self.updates += 1

    @property
    def scores(self) -> Tuple[int, int]:
        return (self.player_score, self.computer_score)

    @property
    def text(self) -> str:
        return f"{self.player_score}   {self.computer_score}"
