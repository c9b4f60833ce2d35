"""
Fetch candidates from the Campaign Finance API and print them as JSON.

Usage:
    uv run python scripts/fetch_candidates.py find H0NY01023
    uv run python scripts/fetch_candidates.py leaders end_cash --cycle 2024
    uv run python scripts/fetch_candidates.py search "Doe" --offset 20
    uv run python scripts/fetch_candidates.py new
    uv run python scripts/fetch_candidates.py state NY --chamber house --district 7
"""
import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings, CURRENT_CYCLE
from src.ingestion.candidates import get_candidates_api
from src.models.candidate import LeaderCategory


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query candidates from the Campaign Finance API"
    )
    parser.add_argument(
        "--cycle",
        type=int,
        default=CURRENT_CYCLE,
        help=f"Election cycle (default: {CURRENT_CYCLE})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    find = commands.add_parser("find", help="Look up a candidate by FEC ID")
    find.add_argument("fec_id")

    leaders = commands.add_parser("leaders", help="Leading candidates by category")
    leaders.add_argument(
        "category",
        choices=[c.value for c in LeaderCategory],
        help="; ".join(f"{c.value}: {c.description}" for c in LeaderCategory)
    )

    search = commands.add_parser("search", help="Search candidates by name")
    search.add_argument("name")
    search.add_argument("--offset", type=int)

    new = commands.add_parser("new", help="Newly registered candidates")
    new.add_argument("--offset", type=int)

    state = commands.add_parser("state", help="Candidates for a state's seats")
    state.add_argument("state")
    state.add_argument("--chamber", choices=["house", "senate"])
    state.add_argument("--district", type=int)
    state.add_argument("--offset", type=int)

    return parser


def run(args: argparse.Namespace) -> list:
    """Dispatch the parsed command and return candidate records."""
    api = get_candidates_api()

    if args.command == "find":
        candidate = api.find(args.fec_id, cycle=args.cycle)
        return [candidate] if candidate else []
    if args.command == "leaders":
        return api.leaders(args.category, cycle=args.cycle)
    if args.command == "search":
        return api.search(args.name, cycle=args.cycle, offset=args.offset)
    if args.command == "new":
        return api.new_candidates(cycle=args.cycle, offset=args.offset)
    return api.state(
        args.state,
        chamber=args.chamber,
        district=args.district,
        cycle=args.cycle,
        offset=args.offset,
    )


def main():
    """CLI entry point"""
    args = build_parser().parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else settings.LOG_LEVEL
    logging.basicConfig(level=log_level, format=settings.LOG_FORMAT)

    try:
        candidates = run(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\n❌ Fatal error: {e}")
        logging.exception("Fatal error during fetch")
        sys.exit(1)

    print(json.dumps([c.model_dump(mode="json") for c in candidates], indent=2))


if __name__ == "__main__":
    main()
