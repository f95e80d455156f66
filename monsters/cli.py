"""
Command-line interface for the monster store.

Provides print utilities and the ``monsters`` entry point.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from monsters.config import Config
from monsters.database import INSERT_FAILED, MonsterDatabase
from monsters.logging_setup import setup_logging
from monsters.models import Monster

logger = logging.getLogger(__name__)


def print_monster(monster: Monster) -> None:
    """Print one monster as a two-line summary."""
    print(
        f"  {monster.id:3}. {monster.name} "
        f"[scariness {monster.scariness}, {monster.image_name}, "
        f"{monster.votes} vote(s), {monster.stars} star(s)]"
    )
    print(f"       {monster.description}")


def print_monsters(monsters: List[Monster]) -> None:
    """Pretty-print a list of monsters."""
    print(f"\n{'='*60}")
    print(f" Monsters ({len(monsters)})")
    print(f"{'='*60}")

    if not monsters:
        print("  No monsters yet.")
        return

    for monster in monsters:
        print_monster(monster)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monsters",
        description="Monster store - manage monster entries in a local SQLite file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  monsters add Grok "A rock monster" 7
  monsters list
  monsters show 1
  monsters update 1 Grak "A bigger rock monster" 9
  monsters vote 1
  monsters star 1 --count 3
  monsters delete 1
        """,
    )
    parser.add_argument("--config", type=Path, help="Config file (default: ~/.monster_store/config.json)")
    parser.add_argument("--db", type=Path, help="Database file (overrides the config)")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="add a monster")
    p_add.add_argument("name")
    p_add.add_argument("description")
    p_add.add_argument("scariness", type=int)

    sub.add_parser("list", help="list all monsters")

    p_show = sub.add_parser("show", help="show one monster as JSON")
    p_show.add_argument("id", type=int)

    p_update = sub.add_parser("update", help="update name, description and scariness")
    p_update.add_argument("id", type=int)
    p_update.add_argument("name")
    p_update.add_argument("description")
    p_update.add_argument("scariness", type=int)

    p_delete = sub.add_parser("delete", help="delete a monster")
    p_delete.add_argument("id", type=int)
    p_delete.add_argument(
        "--missing-ok", action="store_true", help="succeed even if the id does not exist"
    )

    p_vote = sub.add_parser("vote", help="add one vote to a monster")
    p_vote.add_argument("id", type=int)

    p_star = sub.add_parser("star", help="add stars to a monster")
    p_star.add_argument("id", type=int)
    p_star.add_argument("-n", "--count", type=int, default=1, help="stars to add (default: 1)")

    return parser


def run_command(db: MonsterDatabase, args: argparse.Namespace) -> int:
    """Execute one parsed command against an open database. Returns the exit code."""
    if args.command == "add":
        monster_id = db.add_monster(args.name, args.description, args.scariness)
        if monster_id == INSERT_FAILED:
            print("Could not add monster.")
            return 1
        print(f"Added monster {monster_id}.")
        return 0

    if args.command == "list":
        print_monsters(db.get_monsters())
        return 0

    if args.command == "show":
        monster = db.get_monster(args.id)
        if monster is None:
            print(f"Monster {args.id} not found.")
            return 1
        print(json.dumps(monster.to_dict(), indent=2, ensure_ascii=False))
        return 0

    if args.command == "update":
        if not db.update_monster(args.id, args.name, args.description, args.scariness):
            print(f"Could not update monster {args.id}.")
            return 1
        print(f"Updated monster {args.id}.")
        return 0

    if args.command == "delete":
        if not db.delete_monster(args.id, missing_ok=args.missing_ok):
            print(f"Could not delete monster {args.id}.")
            return 1
        print(f"Deleted monster {args.id}.")
        return 0

    if args.command == "vote":
        if not db.vote(args.id):
            print(f"Could not vote for monster {args.id}.")
            return 1
        print(f"Voted for monster {args.id}.")
        return 0

    if args.command == "star":
        if args.count < 1:
            print("--count must be at least 1.")
            return 2
        if not db.star(args.id, args.count):
            print(f"Could not star monster {args.id}.")
            return 1
        print(f"Added {args.count} star(s) to monster {args.id}.")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def cli_main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line interface for the monster store."""
    args = _build_parser().parse_args(argv)

    config = Config(args.config)
    setup_logging(debug=args.debug or config.debug, log_dir=config.config_file.parent)

    db_path = args.db or config.db_path
    logger.debug(f"Running {args.command!r} against {db_path}")

    with MonsterDatabase(db_path, schema_version=config.schema_version) as db:
        return run_command(db, args)
