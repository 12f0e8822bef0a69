"""
Debug logging system for Neon Pong.

Records game events frame by frame so rallies, bounces and scoring can be
inspected after a run, and validates the state invariants the simulation
is supposed to keep.
"""

import json
from dataclasses import dataclass
from typing import List, Dict, Any
from enum import Enum


class EventType(Enum):
    """Types of debug events."""

    # Game events
    GAME_START = "game_start"
    GAME_RESET = "game_reset"
    SERVE = "serve"
    SCORE = "score"

    # Ball events
    PADDLE_HIT = "paddle_hit"
    WALL_BOUNCE = "wall_bounce"

    # Validation events
    VALIDATION_ERROR = "validation_error"
    VALIDATION_WARNING = "validation_warning"


@dataclass
class DebugEvent:
    """A single debug event."""

    frame: int
    event_type: EventType
    data: Dict[str, Any]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame": self.frame,
            "type": self.event_type.value,
            "data": self.data,
            "message": self.message,
        }


class DebugLogger:
    """
    Logger for tracking game state and events.

    Disabled loggers drop every event, so a game can always hold one.
    """

    def __init__(self, enabled: bool = True, max_events: int = 10000, print_live: bool = False):
        self.enabled = enabled
        self.max_events = max_events
        self.events: List[DebugEvent] = []
        self.frame = 0
        self.print_live = print_live  # Print events as they happen

    def log(self, event_type: EventType, data: Dict[str, Any], message: str = ""):
        """Log a debug event."""
        if not self.enabled:
            return

        event = DebugEvent(
            frame=self.frame,
            event_type=event_type,
            data=data,
            message=message,
        )
        self.events.append(event)

        if self.print_live:
            self._print_event(event)

        # Limit stored events
        if len(self.events) > self.max_events:
            self.events = self.events[-self.max_events:]

    def _print_event(self, event: DebugEvent):
        """Print an event to console."""
        print(f"[{event.frame:05d}] {event.event_type.value}: {event.message}")
        if event.data:
            for key, value in event.data.items():
                print(f"        {key}: {value}")

    def next_frame(self):
        """Advance to next frame."""
        self.frame += 1

    def reset(self):
        """Clear all events and reset frame counter."""
        self.events = []
        self.frame = 0

    def get_events_by_type(self, event_type: EventType) -> List[DebugEvent]:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def count_by_type(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for event in self.events:
            type_name = event.event_type.value
            counts[type_name] = counts.get(type_name, 0) + 1
        return counts

    def print_summary(self):
        """Print a summary of logged events."""
        print("\n" + "=" * 60)
        print("DEBUG LOG SUMMARY")
        print("=" * 60)
        print(f"Total frames: {self.frame}")
        print(f"Total events: {len(self.events)}")

        print("\nEvents by type:")
        for type_name, count in sorted(self.count_by_type().items()):
            print(f"  {type_name}: {count}")

        errors = self.get_events_by_type(EventType.VALIDATION_ERROR)
        warnings = self.get_events_by_type(EventType.VALIDATION_WARNING)

        if errors:
            print(f"\n⚠ VALIDATION ERRORS: {len(errors)}")
            for event in errors[:5]:  # Show first 5
                print(f"  Frame {event.frame}: {event.message}")
            if len(errors) > 5:
                print(f"  ... and {len(errors) - 5} more")

        if warnings:
            print(f"\n⚠ VALIDATION WARNINGS: {len(warnings)}")
            for event in warnings[:5]:
                print(f"  Frame {event.frame}: {event.message}")
            if len(warnings) > 5:
                print(f"  ... and {len(warnings) - 5} more")

        print("=" * 60)

    def export_json(self, filepath: str):
        """Export all events to JSON file."""
        data = {
            "total_frames": self.frame,
            "events": [e.to_dict() for e in self.events],
        }
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
        print(f"Exported {len(self.events)} events to {filepath}")


class GameValidator:
    """
    Validates game state to catch bugs early.

    Violations are logged as VALIDATION_ERROR events; nothing is raised.
    """

    def __init__(self, logger: DebugLogger, config):
        self.logger = logger
        self.config = config

    def validate(self, state) -> bool:
        """Run every check against the state. Returns True if all pass."""
        results = [
            self.validate_paddles(state),
            self.validate_ball(state),
            self.validate_scores(state),
            self.validate_trail(state),
        ]
        return all(results)

    def validate_paddles(self, state) -> bool:
        """Both paddles must stay inside [0, surface_height - paddle_height]."""
        is_valid = True
        for name, y in (("player", state.player_paddle_y),
                        ("computer", state.computer_paddle_y)):
            if y < 0 or y > self.config.max_paddle_y:
                self.logger.log(
                    EventType.VALIDATION_ERROR,
                    {"paddle": name, "y": y, "max_y": self.config.max_paddle_y},
                    f"{name} paddle out of bounds: {y}",
                )
                is_valid = False
        return is_valid

    def validate_ball(self, state) -> bool:
        """Ball disc must stay vertically inside the surface."""
        radius = self.config.ball_radius
        if radius <= state.ball_y <= self.config.surface_height - radius:
            return True
        self.logger.log(
            EventType.VALIDATION_WARNING,
            {"x": state.ball_x, "y": state.ball_y, "vy": state.ball_velocity_y},
            f"Ball escaped vertically: y={state.ball_y:.1f}",
        )
        return False

    def validate_scores(self, state) -> bool:
        if state.player_score >= 0 and state.computer_score >= 0:
            return True
        self.logger.log(
            EventType.VALIDATION_ERROR,
            {"player": state.player_score, "computer": state.computer_score},
            "Negative score",
        )
        return False

    def validate_trail(self, state) -> bool:
        if len(state.ball_trail) <= self.config.trail_length:
            return True
        self.logger.log(
            EventType.VALIDATION_ERROR,
            {"length": len(state.ball_trail), "capacity": self.config.trail_length},
            "Trail longer than its capacity",
        )
        return False

