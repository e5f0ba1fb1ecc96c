"""Tests for the Game Validation Service."""

import pytest

from src.common.dtos.game_dtos import GameDraftDTO
from src.common.exceptions.custom_exceptions import ValidationError
from src.game_domain.domain.services.game_validation_service import (
    AVAILABLE_INVALID,
    CATEGORY_ID_INVALID,
    PRICE_INVALID,
    STOCK_INVALID,
    GameValidationService,
)


@pytest.fixture
def validation_service() -> GameValidationService:
    return GameValidationService()


@pytest.fixture
def valid_draft() -> GameDraftDTO:
    return GameDraftDTO(
        title="Chrono Trigger",
        platform="SNES",
        category_id="3",
        description="",
        price="19.99",
        stock="10",
        available=1,
    )


def test_valid_draft_has_no_errors(validation_service, valid_draft) -> None:
    assert validation_service.validate(valid_draft) == []
    validation_service.ensure_valid(valid_draft)


@pytest.mark.parametrize("value", ["0", "7", "0042", "1234567890"])
def test_whole_number_fields_accept_digits(validation_service, valid_draft, value) -> None:
    valid_draft.category_id = value
    valid_draft.stock = value

    assert validation_service.validate(valid_draft) == []


@pytest.mark.parametrize("value", ["", "-1", "+1", "1.0", "1e3", "abc", "1 2", "٣"])
def test_whole_number_fields_reject_non_digits(validation_service, valid_draft, value) -> None:
    valid_draft.category_id = value
    valid_draft.stock = value

    assert validation_service.validate(valid_draft) == [CATEGORY_ID_INVALID, STOCK_INVALID]


@pytest.mark.parametrize("value", ["0", "19.99", "-5", "+3.5", ".5", "5.", "1e3", "2.5E-2"])
def test_price_accepts_numbers(validation_service, valid_draft, value) -> None:
    valid_draft.price = value

    assert validation_service.validate(valid_draft) == []


@pytest.mark.parametrize("value", ["", "free", "1,99", "0x1A", "inf", "nan", "1_000", "$5", "."])
def test_price_rejects_non_numbers(validation_service, valid_draft, value) -> None:
    valid_draft.price = value

    assert validation_service.validate(valid_draft) == [PRICE_INVALID]


@pytest.mark.parametrize("available", [-1, 2, 7])
def test_available_must_be_zero_or_one(validation_service, valid_draft, available) -> None:
    valid_draft.available = available

    assert validation_service.validate(valid_draft) == [AVAILABLE_INVALID]


def test_ensure_valid_raises_with_all_errors(validation_service) -> None:
    draft = GameDraftDTO(available=3)

    with pytest.raises(ValidationError) as exc_info:
        validation_service.ensure_valid(draft)

    assert len(exc_info.value.errors) == 6


def test_build_draft_trims_and_defaults(validation_service) -> None:
    draft = validation_service.build_draft({"title": "  Earthbound ", "price": "\t9.5\n"})

    assert draft == GameDraftDTO(title="Earthbound", price="9.5", available=1)


@pytest.mark.parametrize("raw, expected", [("1", 1), ("0", 0), ("", 0), ("on", 0), ("2", 2), (None, 1)])
def test_build_draft_casts_available(validation_service, raw, expected) -> None:
    assert validation_service.build_draft({"available": raw}).available == expected
