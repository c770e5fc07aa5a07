"""CLI entry point: python -m dicegame {run,play,report}"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from dicegame.config import demo_config, load_config
from dicegame.core.dice import RandomDice
from dicegame.core.errors import ConfigurationError
from dicegame.game import DiceGame
from dicegame.reporting.console import ConsoleReporter, render_standings, render_wins
from dicegame.reporting.reader import GameLog
from dicegame.session import SessionRunner


def _run_session(args, console: Console) -> None:
    """Run a session from a config file, or the demo games without one."""
    if args.config is None:
        config = demo_config(seed=args.seed if args.seed is not None else 0)
    else:
        if not args.config.exists():
            print(f"Error: config file not found: {args.config}", file=sys.stderr)
            sys.exit(1)
        config = load_config(args.config)
        if args.seed is not None:
            config.seed = args.seed
    if args.output:
        config.output_dir = args.output

    console.print(f"Session: {config.name} (seed={config.seed})", markup=False, soft_wrap=True)
    console.print(f"Games: {', '.join(config.games)}", markup=False, soft_wrap=True)

    runner = SessionRunner(config, console=console, quiet=args.quiet)
    result = runner.run()

    console.print()
    render_standings(console, result)
    console.print(f"Telemetry: {result.telemetry_dir}", markup=False, soft_wrap=True)


def _play_single(args, console: Console) -> None:
    """Play one ad-hoc game straight to the console."""
    game = DiceGame(
        args.players,
        args.dice,
        args.names,
        dice=RandomDice(seed=args.seed),
        sink=ConsoleReporter(console, quiet=args.quiet),
    )
    result = game.run()
    console.print()
    render_wins(console, f"Round wins after {result.rounds_played} rounds", result.wins_by_name())


def _report(args, console: Console) -> None:
    """Summarize telemetry files."""
    for path in args.files:
        if not path.exists():
            print(f"  SKIP {path} (not found)", file=sys.stderr)
            continue
        log = GameLog.from_file(path)
        status = f"winner {log.winner}" if log.finished else "unfinished"
        console.print(
            f"{log.game_id or path.stem}: {len(log.player_names)} players, "
            f"{log.num_dice} dice, {len(log.rounds)} rounds, {log.rolls} rolls, {status}",
            markup=False,
            soft_wrap=True,
        )
        render_wins(console, f"Round wins: {path.name}", log.round_wins())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicegame",
        description="First-to-seven dice game simulator",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Run a session of games")
    run_p.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help="Path to session YAML config file (default: built-in demo games)",
    )
    run_p.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output directory (default: $DICEGAME_OUTPUT_DIR or output/)",
    )
    run_p.add_argument("--seed", type=int, default=None, help="Override the session seed")
    run_p.add_argument("--quiet", action="store_true", help="Hide individual dice")
    run_p.set_defaults(func=_run_session)

    play_p = sub.add_parser("play", help="Play a single game")
    play_p.add_argument("-p", "--players", type=int, default=2, help="Number of players (default: 2)")
    play_p.add_argument("-d", "--dice", type=int, default=1, help="Dice per player (default: 1)")
    play_p.add_argument("-n", "--names", nargs="+", default=None, help="Names for the first seats")
    play_p.add_argument("--seed", type=int, default=None, help="Seed for the dice")
    play_p.add_argument("--quiet", action="store_true", help="Hide individual dice")
    play_p.set_defaults(func=_play_single)

    report_p = sub.add_parser("report", help="Summarize telemetry files")
    report_p.add_argument("files", type=Path, nargs="+", help="JSONL telemetry file(s)")
    report_p.set_defaults(func=_report)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = Console()
    try:
        args.func(args, console)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
