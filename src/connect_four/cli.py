"""
Command-line interface: launch the game or print stored results.
"""

import argparse
import logging
from typing import List, Optional

from connect_four.api import play
from connect_four.core.errors import RecorderError
from connect_four.core.types import Cell
from connect_four.memory import open_readonly
from connect_four.utils.config import Config, CELL_SIZE, COLS, DEFAULT_DB_PATH, ROWS


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Two-player Connect Four with saved win/loss records"
    )
    parser.add_argument(
        "--rows", "-r",
        type=int,
        default=ROWS,
        help=f"Board rows (default: {ROWS})",
    )
    parser.add_argument(
        "--cols", "-c",
        type=int,
        default=COLS,
        help=f"Board columns (default: {COLS})",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=CELL_SIZE,
        help=f"Cell size in pixels (default: {CELL_SIZE})",
    )
    parser.add_argument(
        "--db",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help="Results database file (default: package data directory)",
    )
    parser.add_argument(
        "--no-db",
        action="store_true",
        help="Do not save results",
    )
    parser.add_argument(
        "--first-player", "-f",
        type=int,
        choices=[1, 2],
        default=1,
        help="Which player moves first in every match (default: 1)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print the leaderboard and recent matches, then exit",
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=10,
        help="Rows to show with --stats (default: 10)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Translate parsed arguments into a Config."""
    return Config(
        rows=args.rows,
        cols=args.cols,
        cell_size=args.cell_size,
        db_path=args.db,
        record_results=not args.no_db,
        first_player=Cell(args.first_player),
    )


def format_stats(db_path: str, limit: int) -> str:
    """Render the leaderboard and match history stored in `db_path`."""
    with open_readonly(db_path) as memory:
        leaders = memory.leaderboard(limit)
        matches = memory.recent_matches(limit)
        info = memory.get_info()

    lines = [
        f"{info['players']} players, {info['matches']} matches ({info['draws']} draws)",
        "",
        f"{'Player':<15}  {'W':>4}  {'L':>4}  {'Win %':>6}",
    ]
    for rec in leaders:
        lines.append(f"{rec.name:<15}  {rec.wins:>4}  {rec.losses:>4}  {rec.win_rate:>6.1%}")

    lines.append("")
    lines.append("Recent matches:")
    for m in matches:
        result = "draw" if m.is_draw else f"{m.winner} won"
        lines.append(f"  {m.played_at}  {m.player1} vs {m.player2}: {result}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.stats:
        try:
            print(format_stats(args.db, args.limit))
        except RecorderError as e:
            raise SystemExit(f"Cannot read results: {e}") from e
        return

    try:
        config = build_config(args)
    except ValueError as e:
        raise SystemExit(f"Invalid settings: {e}") from e

    play(config)


if __name__ == "__main__":
    main()
