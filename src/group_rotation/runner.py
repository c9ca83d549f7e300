"""Command-line runner: read a roster, search a schedule, print it."""

import argparse
import logging
import sys

from .config import load_config
from .models import ScheduleResult
from .planner import group_size_for
from .roster_import import parse_roster_text, read_roster
from .search import NoFeasibleScheduleError, search_schedule
from .statistics import pairing_summary
from .translations import available_languages, set_language, tr

logger = logging.getLogger(__name__)


def int_at_least(minimum: int):
    """argparse type for integers no smaller than ``minimum``."""
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {value}")
        return value
    return parse


def non_negative_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rotate a roster through small groups with as few repeated pairings as possible"
    )
    parser.add_argument("roster", nargs="?", help="Excel or CSV file with one name per row")
    parser.add_argument("--column", help="Roster column to read (default: first column)")
    parser.add_argument("--names", help="Comma-separated names instead of a roster file")
    size = parser.add_mutually_exclusive_group()
    size.add_argument("--group-size", type=int_at_least(2), help="Desired group size (default: 3)")
    size.add_argument("--groups", type=int_at_least(1), help="Desired number of groups per round")
    parser.add_argument("--rounds", type=int_at_least(1), default=12, help="Number of rounds (default: 12)")
    parser.add_argument("--restarts", type=int_at_least(1), help="Restart count (overrides --config)")
    parser.add_argument("--config", help="JSON file with search weights")
    parser.add_argument("--seed", type=int_at_least(0), help="Seed for a reproducible schedule")
    parser.add_argument("--workers", type=int_at_least(1), help="Worker processes for restarts")
    parser.add_argument("--deadline", type=non_negative_float, help="Time budget in seconds")
    parser.add_argument("--lang", choices=[code for code, _ in available_languages()])
    parser.add_argument("--verbose", "-v", action="store_true", help="Log search progress")
    return parser


def format_result(result: ScheduleResult, participants: list) -> str:
    lines = []
    for round_index, round_groups in enumerate(result.schedule, start=1):
        lines.append(f"{tr('Round')} {round_index}")
        for group_index, group in enumerate(round_groups, start=1):
            lines.append(f"  {tr('Group')} {group_index}: {', '.join(str(p) for p in group)}")

    summary = pairing_summary(result.schedule, participants)
    lines.append("")
    lines.append(f"{tr('Score')}: {result.score}")
    lines.append(f"{tr('Restarts')}: {result.restarts_run} "
                 f"({result.restarts_failed} {tr('failed')}), "
                 f"{tr('Best restart')}: {result.best_restart + 1}")
    lines.append(f"{tr('Pairing summary')}:")
    lines.append(f"  {tr('Most frequent pair')}: {summary['max_count']}")
    lines.append(f"  {tr('Least frequent pair')}: {summary['min_count']}")
    lines.append(f"  {tr('Imbalance')}: {summary['imbalance']}")
    lines.append(f"  {tr('Repeated pairs')}: {summary['repeated_pairs']}")
    lines.append(f"  {tr('Pairs never grouped')}: {summary['unmet_pairs']}")
    if result.timed_out:
        lines.append(tr("Deadline reached, showing best schedule so far"))
    return "\n".join(lines)


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    if args.lang:
        set_language(args.lang)

    if args.names:
        participants = parse_roster_text(args.names)
    elif args.roster:
        participants = read_roster(args.roster, args.column)
    else:
        participants = []
    if not participants:
        print(tr("No participants given"), file=sys.stderr)
        return 1

    try:
        config = load_config(args.config, restart_count=args.restarts)
    except (OSError, ValueError) as e:
        print(f"{tr('Invalid configuration')}: {e}", file=sys.stderr)
        return 1

    if args.groups is not None:
        group_size = group_size_for(len(participants), args.groups)
    else:
        group_size = max(2, args.group_size or 3)
    group_size = min(group_size, max(2, len(participants)))

    try:
        result = search_schedule(
            participants, group_size, args.rounds, config,
            seed=args.seed, max_workers=args.workers, deadline=args.deadline,
        )
    except NoFeasibleScheduleError as e:
        logger.error("Scheduling failed: %s", e)
        print(tr("No feasible schedule found"), file=sys.stderr)
        return 1

    print(format_result(result, participants))
    return 0


def main():
    sys.exit(run())
