# src/game_domain/application/game_controller.py
"""Application controller for the game catalog: list, detail, create and search."""

import logging
from typing import Any, Optional
from urllib.parse import quote

from src.common.config.settings import settings
from src.common.dtos.game_dtos import RedirectDTO, RequestDTO
from src.common.exceptions.custom_exceptions import DatabaseError, ValidationError
from src.common.utils.parse_utils import strip_text, to_int
from src.game_domain.domain.repositories.game_repository import IGameRepository
from src.game_domain.domain.services.game_validation_service import GameValidationService
from src.game_domain.domain.services.search_query_service import parse_search_terms
from src.game_domain.presentation.views.game_view import IGameView

logger = logging.getLogger(__name__)

LIST_FAILED = "There was a problem displaying games."
SEARCH_FAILED = "An error has occurred while searching games."
INSERT_FAILED = "There was a problem inserting the new game. Please try again."

SEARCH_QUERY_PARAM = "query-terms"


class GameController:
    """Turns a request into a catalog operation and picks the view that shows the outcome."""

    def __init__(
        self,
        game_repo: IGameRepository,
        view: IGameView,
        validation_service: Optional[GameValidationService] = None,
        base_url: Optional[str] = None,
    ) -> None:
        """Initializes the GameController."""
        self.game_repo = game_repo
        self.view = view
        self.validation_service = validation_service or GameValidationService()
        self.base_url = settings.BASE_URL if base_url is None else base_url

    def dispatch(self, action: str, request: Optional[RequestDTO] = None, *args: Any) -> Optional[RedirectDTO]:
        """
        Runs the named action. Unknown names render an error instead of raising.

        Returns the redirect produced by a successful create, otherwise None.
        """
        request = request or RequestDTO()

        if action == "index":
            self.index()
        elif action == "detail":
            self.detail(args[0] if args else "")
        elif action == "create":
            return self.create(request)
        elif action == "search":
            self.search(request)
        elif action == "error":
            self.error(str(args[0]) if args else "")
        else:
            logger.warning(f"Unknown action requested: '{action}'")
            self.error(f"Calling method '{action}' caused errors. Route does not exist.")
        return None

    def index(self) -> None:
        """Displays all games, or an error when the store fails."""
        try:
            games = self.game_repo.list_games()
        except DatabaseError as e:
            logger.error(f"Listing games failed: {e}")
            games = None

        if games is None:
            self.error(LIST_FAILED)
            return

        logger.info(f"Listing {len(games)} games")
        self.view.render_list(games)

    def detail(self, game_id: Any) -> None:
        """Displays one game. The raw id is echoed back in the not-found message."""
        try:
            game = self.game_repo.get_game_by_id(to_int(game_id))
        except DatabaseError as e:
            logger.error(f"Fetching game id='{game_id}' failed: {e}")
            game = None

        if game is None:
            self.error(f"There was a problem displaying the game id='{game_id}'.")
            return

        self.view.render_detail(game)

    def create(self, request: RequestDTO) -> Optional[RedirectDTO]:
        """
        Shows the blank form, or validates and stores a submitted game.

        Returns a redirect to the new game's detail page on success. Every
        other outcome renders the create form and returns None.
        """
        if not request.is_submission:
            self.view.render_create_form([], {})
            return None

        draft = self.validation_service.build_draft(request.form)
        prefill = draft.to_prefill()
        errors: list[str] = []

        try:
            self.validation_service.ensure_valid(draft)
        except ValidationError as e:
            logger.info(f"Rejected new game with {len(e.errors)} validation error(s)")
            self.view.render_create_form(e.errors, prefill)
            return None

        try:
            new_id = self.game_repo.create_game(draft.to_payload())
        except DatabaseError as e:
            logger.error(f"Inserting game '{draft.title}' failed: {e}")
            new_id = None

        if new_id is None:
            errors.append(INSERT_FAILED)
            self.view.render_create_form(errors, prefill)
            return None

        logger.info(f"Created game '{draft.title}' with id {new_id}")
        return RedirectDTO(game_id=new_id, location=f"{self.base_url}game/detail/{quote(str(new_id))}")

    def search(self, request: RequestDTO) -> None:
        """Searches by keywords. A whole-word OR switches from all-keywords to any-keyword matching."""
        query_terms = strip_text(request.query.get(SEARCH_QUERY_PARAM))

        if query_terms == "":
            self.index()
            return

        terms, mode = parse_search_terms(query_terms)
        logger.info(f"Searching games for '{terms}' in {mode.value} mode")

        try:
            games = self.game_repo.search_games(terms, mode)
        except DatabaseError as e:
            logger.error(f"Searching games for '{terms}' failed: {e}")
            games = None

        if games is None:
            self.error(SEARCH_FAILED)
            return

        self.view.render_search_results(query_terms, games)

    def error(self, message: str) -> None:
        """Displays an error page with the given message."""
        self.view.render_error(message)
