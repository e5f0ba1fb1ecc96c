# src/game_domain/presentation/views/game_view.py
"""Game view renderer interface."""
from abc import ABC, abstractmethod
from typing import Any, Sequence

from src.common.dtos.game_dtos import GameDTO


class IGameView(ABC):

    @abstractmethod
    def render_list(self, games: Sequence[GameDTO]) -> None:
        """Displays every game in the catalog."""
        pass

    @abstractmethod
    def render_detail(self, game: GameDTO) -> None:
        """Displays a single game."""
        pass

    @abstractmethod
    def render_create_form(self, errors: list[str], prefill: dict[str, Any]) -> None:
        """Displays the create form with ordered error messages and previously submitted values."""
        pass

    @abstractmethod
    def render_search_results(self, query: str, games: Sequence[GameDTO]) -> None:
        """Displays the games matching query, echoing the query as typed."""
        pass

    @abstractmethod
    def render_error(self, message: str) -> None:
        """Displays an error message."""
        pass
