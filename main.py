"""Main application entry point for the game catalog."""

import argparse
import logging
import sys
from typing import Optional

from src.common.dtos.game_dtos import RequestDTO
from src.common.exceptions.custom_exceptions import DatabaseError
from src.common.logger_config import setup_logging

# Game Domain Imports
from src.game_domain.application.game_controller import SEARCH_QUERY_PARAM, GameController
from src.game_domain.infrastructure.persistence.mysql_game_repository import MySQLGameRepository
from src.game_domain.presentation.views.console_game_view import ConsoleGameView

logger = logging.getLogger(__name__)

CREATE_FIELDS = ("title", "platform", "category_id", "description", "price", "stock")


def setup_game_dependencies() -> GameController:
    """Initializes and wires up Game domain dependencies."""
    game_repository = MySQLGameRepository()
    view = ConsoleGameView()
    return GameController(game_repo=game_repository, view=view)


def create_game_db_tables() -> None:
    """Creates tables for the Game domain."""
    game_repo = MySQLGameRepository()
    try:
        game_repo.create_tables()
    except DatabaseError as e:
        logger.error(f"Error creating game database tables: {e}")
        raise
    finally:
        game_repo.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse and manage the game catalog.")
    subparsers = parser.add_subparsers(dest="action", required=True)

    subparsers.add_parser("list", help="List all games")
    subparsers.add_parser("init-db", help="Create the games table")

    detail = subparsers.add_parser("detail", help="Show one game")
    detail.add_argument("id")

    search = subparsers.add_parser("search", help="Search games; use OR between keywords to match any")
    search.add_argument("query", nargs="*")

    create = subparsers.add_parser("create", help="Add a game")
    for name in CREATE_FIELDS:
        create.add_argument(f"--{name.replace('_', '-')}", dest=name, default=None)
    create.add_argument("--available", default=None)
    create.add_argument("--form", action="store_true", help="Only show the blank create form")

    return parser


def run(argv: Optional[list[str]] = None) -> int:
    """Parses the command line and routes it to the controller."""
    known_actions = {"list", "init-db", "detail", "search", "create", "-h", "--help"}
    argv = sys.argv[1:] if argv is None else argv

    setup_logging()

    if argv and argv[0] not in known_actions:
        # Let the controller report routes it does not know
        setup_game_dependencies().dispatch(argv[0])
        return 1

    args = build_parser().parse_args(argv)

    if args.action == "init-db":
        try:
            create_game_db_tables()
        except DatabaseError:
            return 1
        return 0

    controller = setup_game_dependencies()

    if args.action == "list":
        controller.dispatch("index")
    elif args.action == "detail":
        controller.dispatch("detail", None, args.id)
    elif args.action == "search":
        request = RequestDTO(query={SEARCH_QUERY_PARAM: " ".join(args.query)})
        controller.dispatch("search", request)
    elif args.action == "create":
        if args.form:
            controller.dispatch("create", RequestDTO(method="GET"))
            return 0
        form = {name: getattr(args, name) for name in CREATE_FIELDS if getattr(args, name) is not None}
        if args.available is not None:
            form["available"] = args.available
        redirect = controller.dispatch("create", RequestDTO(method="POST", form=form))
        if redirect is None:
            return 1
        logger.info(f"Game created, see {redirect.location}")
        controller.dispatch("detail", None, redirect.game_id)

    return 0


if __name__ == "__main__":
    sys.exit(run())
