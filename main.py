#!/usr/bin/env python3
"""
Neon Pong - Main Entry Point

One paddle follows your mouse or arrow keys, the other is driven by the
computer. The ball leaves a fading color trail behind it.
"""

import argparse
import random
from typing import Optional

from tqdm import tqdm

from config import Config, ConfigError
from debug import DebugLogger
from game import Game
from scoreboard import Scoreboard
from stats_tracker import StatsTracker


def build_config(args: argparse.Namespace) -> Config:
    """Load the config file (if any) and apply command line overrides."""
    config = Config.load(args.config) if args.config else Config()

    overrides = {}
    if args.fps is not None:
        overrides["fps"] = args.fps
    if args.width is not None:
        overrides["surface_width"] = args.width
    if args.height is not None:
        overrides["surface_height"] = args.height

    if overrides:
        data = config.to_dict()
        data.update(overrides)
        config = Config.from_dict(data)

    config.validate()
    return config


def create_game(
    config: Config,
    seed: Optional[int] = None,
    scoreboard: Optional[Scoreboard] = None,
    logger: Optional[DebugLogger] = None,
) -> Game:
    """Create a game with its own random source."""
    return Game(config, rng=random.Random(seed), score_sink=scoreboard, logger=logger)


def run_visual_game(config: Config, seed: Optional[int] = None, logger: Optional[DebugLogger] = None) -> Scoreboard:
    """Run the game in a pygame window until it is closed.

    Responsibilities are cleanly separated:
    - InputHandler: pointer/key events, pause and restart
    - Game: runs simulation logic
    - GameWindow: draws game state to screen (passive)
    """
    try:
        from input_handler import InputHandler
        from renderer import GameWindow
    except ImportError as e:
        print(f"Error: {e}")
        print("Install pygame with: pip install pygame")
        raise SystemExit(1)

    scoreboard = Scoreboard()
    game = create_game(config, seed, scoreboard, logger)
    input_handler = InputHandler(game)
    window = GameWindow(config)
    stats = StatsTracker()

    print("\n=== Neon Pong ===")
    print("Mouse / UP / DOWN - Move paddle")
    print("SPACE - Pause, R - Restart, ESC - Quit")
    print("=================\n")

    while input_handler.running:
        input_handler.process_events()

        if input_handler.consume_restart_request():
            game.reset()
            stats.reset()

        if not input_handler.state.paused:
            stats.record(game.step())

        window.render(game.state, scoreboard, paused=input_handler.state.paused)
        window.tick()

    window.close()
    print_match_summary(game, stats)
    return scoreboard


def run_headless(
    config: Config,
    frames: int = 3600,
    seed: Optional[int] = None,
    logger: Optional[DebugLogger] = None,
    progress: bool = True,
) -> StatsTracker:
    """Simulate a number of frames without a window.

    Returns:
        The StatsTracker filled during the run.
    """
    scoreboard = Scoreboard()
    game = create_game(config, seed, scoreboard, logger)
    stats = StatsTracker()

    print("\n=== Headless Simulation ===")
    print(f"Frames: {frames}")
    print(f"Seed: {seed if seed is not None else 'random'}")
    print("===========================\n")

    for _ in tqdm(range(frames), desc="Simulating", unit="frame", disable=not progress):
        stats.record(game.step())

    print_match_summary(game, stats)
    return stats


def print_match_summary(game: Game, stats: StatsTracker) -> None:
    player, computer = game.scores
    print(f"\nFinal score: Player {player} - {computer} Computer")
    print(f"Frames: {stats.frame_count}, points: {stats.points_played}")
    print(f"Paddle hits: {stats.total_hits}, wall bounces: {stats.wall_bounces}")
    print(f"Longest rally: {stats.longest_rally}, average rally: {stats.average_rally:.2f}")
    print(f"Recent rallies: {stats.recent_rallies()}")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Neon Pong - play against a tracking computer paddle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play in a window
  python main.py

  # Simulate one minute of play without graphics
  python main.py --mode headless --frames 3600 --seed 7

  # Record every bounce and score to a JSON log
  python main.py --mode headless --debug --debug-log events.json
""",
    )
    parser.add_argument(
        "--mode",
        choices=["visual", "headless"],
        default="visual",
        help="Game mode (default: %(default)s)\n"
        "  visual: Play in a pygame window\n"
        "  headless: Simulate frames without graphics",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=3600,
        metavar="N",
        help="Number of frames to simulate in headless mode (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for serve directions and colors (default: random)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        metavar="FPS",
        help=f"Target frames per second in visual mode (default: {Config().fps})\n"
        "Use 0 for unlimited FPS",
    )
    parser.add_argument("--width", type=int, default=None, help="Surface width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Surface height in pixels")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="FILE",
        help="JSON file with config values; flags above override it",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log game events and validate the state every frame",
    )
    parser.add_argument(
        "--debug-log",
        type=str,
        default=None,
        metavar="FILE",
        help="Export the debug events to a JSON file (implies --debug)",
    )

    args = parser.parse_args(argv)

    if args.frames < 0:
        parser.error("--frames cannot be negative")

    try:
        config = build_config(args)
    except ConfigError as e:
        parser.error(str(e))

    logger = DebugLogger() if (args.debug or args.debug_log) else None

    if args.mode == "headless":
        run_headless(config, frames=args.frames, seed=args.seed, logger=logger)
    else:
        run_visual_game(config, seed=args.seed, logger=logger)

    if logger is not None:
        logger.print_summary()
        if args.debug_log:
            logger.export_json(args.debug_log)


if __name__ == "__main__":
    main()
