#!/usr/bin/env python3
"""
CLI for the Strongs Brazil admin tools.

Usage:
    strongs-admin rankings                          # Confederation board, live season
    strongs-admin rankings --board members          # Member board
    strongs-admin rankings --season-id <id>         # Board for an archived season
    strongs-admin seasons                           # List archived seasons
    strongs-admin archive-season --name "Temporada 15"
    strongs-admin set-week --week 2                 # Open week 2 (1-4) for editing
    strongs-admin seed --owner-username X --owner-password Y
    strongs-admin clear-data                        # Clear all data (CAUTION!)
"""

import argparse
import logging
import sys

from app.schemas.settings import GlobalSettings
from app.services.rankings import build_rankings
from app.services.seasons import SeasonNotFoundError, archive_season, summarize_season

from .db import get_repository
from .seed import clear_all_data, seed_defaults

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

BOARDS = ["confederations", "members", "top100"]


def run_command(args: argparse.Namespace) -> int:
    """Run the command based on CLI arguments."""
    repo = get_repository()

    if args.command == "rankings":
        try:
            rankings = build_rankings(repo.load_snapshot(), args.season_id)
        except SeasonNotFoundError as e:
            print(f"Error: {e}")
            return 1
        title = rankings.season_name or "Current season"
        _print_board(args.board, title, getattr(rankings, args.board))

    elif args.command == "seasons":
        seasons = repo.list_archived_seasons()
        if not seasons:
            print("No archived seasons yet.")
        for season in reversed(seasons):
            summary = summarize_season(season)
            print(
                f"{summary.id}  {summary.date:%Y-%m-%d}  {summary.name}  "
                f"({summary.member_count} members, {summary.confederation_count} confederations)"
            )

    elif args.command == "archive-season":
        if not args.name:
            print("Error: --name is required for archive-season")
            return 1
        season, reset_members = archive_season(
            args.name, repo.list_confederations(), repo.list_members()
        )
        repo.add_archived_season(season)
        repo.save_members(reset_members)
        print(f"\n✅ Archived {season.name} ({season.id})")
        print(f"   Members reset: {len(reset_members)}")

    elif args.command == "set-week":
        if args.week is None or not 1 <= args.week <= 4:
            print("Error: --week must be between 1 and 4")
            return 1
        repo.save_settings(GlobalSettings(active_week=args.week - 1))
        print(f"\n✅ Week {args.week} is now open for editing")

    elif args.command == "seed":
        if not args.owner_username or not args.owner_password:
            print("Error: --owner-username and --owner-password are required for seed")
            return 1
        results = seed_defaults(repo, args.owner_username, args.owner_password)
        print("\n✅ Seed complete")
        print(f"   Confederations created: {results['confederations']}")
        print(f"   Owner created: {'yes' if results['owner'] else 'no (exists)'}")

    elif args.command == "clear-data":
        print("⚠️  WARNING: This will delete ALL data from the database!")
        response = input("Are you sure? (y/N): ").strip().lower()
        if response != "y":
            print("Aborted.")
            return 1
        logger.info("Clearing all data...")
        results = clear_all_data(repo)
        print("\n✅ All data cleared!")
        for table, count in results.items():
            print(f"   {table}: {count} records deleted")

    return 0


def _print_board(board: str, title: str, standings: list) -> None:
    """Print a ranking board."""
    print(f"\n{'='*50}")
    print(f"{board.capitalize()} ranking - {title}")
    print(f"{'='*50}")

    if not standings:
        print("(empty)")
        return

    for s in standings:
        if board == "confederations":
            print(
                f"#{s.rank:<3} {s.name:<25} {s.tier.value:<9} "
                f"{s.total_points:>8.2f}  ({s.member_count} members)"
            )
        elif board == "members":
            print(f"#{s.rank:<3} {s.name:<20} {s.conf_name:<20} {s.points:>8.2f}")
        else:
            print(f"#{s.rank:<3} {s.conf_name:<25} {s.total_points:>6}  ({len(s.entries)} entries)")


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Strongs Brazil - Admin tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  strongs-admin rankings --board top100
  strongs-admin archive-season --name "Temporada 15"
  strongs-admin set-week --week 3
        """,
    )

    parser.add_argument(
        "command",
        choices=[
            "rankings",
            "seasons",
            "archive-season",
            "set-week",
            "seed",
            "clear-data",
        ],
        help="Command to run",
    )

    parser.add_argument(
        "--board",
        choices=BOARDS,
        default="confederations",
        help="Ranking board to print (default: confederations)",
    )

    parser.add_argument(
        "--season-id",
        help="Archived season id for rankings (default: current season)",
    )

    parser.add_argument(
        "--name",
        help="Season name for archive-season (e.g., 'Temporada 15')",
    )

    parser.add_argument(
        "--week",
        type=int,
        help="Week number to open for set-week (1-4)",
    )

    parser.add_argument("--owner-username", help="Owner username for seed")
    parser.add_argument("--owner-password", help="Owner password for seed")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return run_command(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
