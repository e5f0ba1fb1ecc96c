"""Tests for the command-line entry point."""

from unittest.mock import Mock

import pytest

import main
from src.common.dtos.game_dtos import RedirectDTO, RequestDTO
from src.game_domain.application.game_controller import GameController


@pytest.fixture
def mock_controller(mocker) -> Mock:
    controller = Mock(spec=GameController)
    mocker.patch.object(main, "setup_game_dependencies", return_value=controller)
    mocker.patch.object(main, "setup_logging")
    return controller


def test_run_list(mock_controller) -> None:
    assert main.run(["list"]) == 0
    mock_controller.dispatch.assert_called_once_with("index")


def test_run_detail(mock_controller) -> None:
    main.run(["detail", "notanumber"])
    mock_controller.dispatch.assert_called_once_with("detail", None, "notanumber")


def test_run_search_joins_words(mock_controller) -> None:
    main.run(["search", "zelda", "OR", "mario"])
    mock_controller.dispatch.assert_called_once_with("search", RequestDTO(query={"query-terms": "zelda OR mario"}))


def test_run_create_success_shows_new_game(mock_controller) -> None:
    mock_controller.dispatch.side_effect = [RedirectDTO(game_id=42, location="/game/detail/42"), None]

    exit_code = main.run(
        ["create", "--title", "Chrono Trigger", "--platform", "SNES", "--category-id", "3", "--price", "19.99", "--stock", "10"]
    )

    assert exit_code == 0
    create_call, detail_call = mock_controller.dispatch.call_args_list
    request = create_call.args[1]
    assert request.method == "POST"
    assert request.form == {
        "title": "Chrono Trigger",
        "platform": "SNES",
        "category_id": "3",
        "price": "19.99",
        "stock": "10",
    }
    assert detail_call.args == ("detail", None, 42)


def test_run_create_failure(mock_controller) -> None:
    mock_controller.dispatch.return_value = None

    assert main.run(["create", "--title", ""]) == 1


def test_run_create_blank_form(mock_controller) -> None:
    main.run(["create", "--form"])
    mock_controller.dispatch.assert_called_once_with("create", RequestDTO(method="GET"))


def test_run_unknown_action_goes_through_dispatch(mock_controller) -> None:
    assert main.run(["delete"]) == 1
    mock_controller.dispatch.assert_called_once_with("delete")
