# src/game_domain/domain/repositories/game_repository.py
"""Game catalog repository interface."""
from abc import ABC, abstractmethod
from typing import Any, Optional

from src.common.dtos.game_dtos import GameDTO, SearchMode


class IGameRepository(ABC):
    """Catalog store. Implementations raise DatabaseError when the store itself fails."""

    @abstractmethod
    def list_games(self) -> list[GameDTO]:
        """Retrieves all games. An empty catalog is an empty list, not a failure."""
        pass

    @abstractmethod
    def get_game_by_id(self, game_id: int) -> Optional[GameDTO]:
        """Retrieves a single game, or None when no game has that id."""
        pass

    @abstractmethod
    def create_game(self, payload: dict[str, Any]) -> Optional[int]:
        """Inserts a game and returns its new id, or None when nothing was inserted."""
        pass

    @abstractmethod
    def search_games(self, terms: str, mode: SearchMode) -> list[GameDTO]:
        """Retrieves games matching the keywords in terms, combined with AND or OR."""
        pass
