# tests/conftest.py
import pytest
from unittest.mock import Mock

from src.common.config.settings import settings
from src.common.dtos.game_dtos import GameDTO
from src.game_domain.application.game_controller import GameController
from src.game_domain.infrastructure.persistence.mysql_game_repository import MySQLGameRepository
from src.game_domain.presentation.views.game_view import IGameView


@pytest.fixture(autouse=True)
def mock_settings_base_url(mocker) -> None:
    """Mocks BASE_URL in settings so redirect locations are predictable."""
    mocker.patch.object(settings, "BASE_URL", "http://localhost/games/")


@pytest.fixture
def mock_game_repository() -> Mock:
    """Mock for MySQLGameRepository."""
    # We specify the actual class for a more accurate mock spec
    return Mock(spec=MySQLGameRepository)


@pytest.fixture
def mock_game_view() -> Mock:
    """Mock for the view renderer."""
    return Mock(spec=IGameView)


@pytest.fixture
def game_controller(mock_game_repository, mock_game_view) -> GameController:
    """Instance of GameController with mocked dependencies."""
    return GameController(game_repo=mock_game_repository, view=mock_game_view)


@pytest.fixture
def sample_game_dto() -> GameDTO:
    """Sample GameDTO for tests."""
    return GameDTO(
        id=42,
        title="Chrono Trigger",
        platform="SNES",
        category_id=3,
        description="Time travelling RPG.",
        price=19.99,
        stock=10,
        available=1,
    )


@pytest.fixture
def sample_game_dto_list(sample_game_dto) -> list[GameDTO]:
    """Sample list of GameDTOs."""
    return [
        sample_game_dto,
        GameDTO(
            id=43,
            title="Super Mario World",
            platform="SNES",
            category_id=1,
            description="",
            price=14.5,
            stock=0,
            available=0,
        ),
    ]


@pytest.fixture
def valid_create_form() -> dict[str, str]:
    """Submitted create form that passes validation (availability left unset)."""
    return {
        "title": "Chrono Trigger",
        "platform": "SNES",
        "category_id": "3",
        "description": "",
        "price": "19.99",
        "stock": "10",
    }
