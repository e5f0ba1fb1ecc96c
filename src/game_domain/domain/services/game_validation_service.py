# src/game_domain/domain/services/game_validation_service.py
"""Domain service validating submitted game data."""

import logging
from typing import Any, Mapping

from src.common.dtos.game_dtos import GameDraftDTO
from src.common.exceptions.custom_exceptions import ValidationError
from src.common.utils.parse_utils import is_digits, is_numeric, strip_text, to_int

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "Title is required."
PLATFORM_REQUIRED = "Platform is required."
CATEGORY_ID_INVALID = "Category ID must be a whole number."
PRICE_INVALID = "Price must be a valid number."
STOCK_INVALID = "Stock must be a whole number."
AVAILABLE_INVALID = "Available must be 0 or 1."


class GameValidationService:
    """Builds drafts from submitted form data and checks them field by field."""

    def build_draft(self, form: Mapping[str, Any]) -> GameDraftDTO:
        """
        Reads the submitted form into a draft.

        Text fields are trimmed and default to "". The availability flag
        defaults to 1 when absent and is otherwise cast to int.
        """
        available = to_int(form["available"]) if "available" in form and form["available"] is not None else 1
        return GameDraftDTO(
            title=strip_text(form.get("title")),
            platform=strip_text(form.get("platform")),
            category_id=strip_text(form.get("category_id")),
            description=strip_text(form.get("description")),
            price=strip_text(form.get("price")),
            stock=strip_text(form.get("stock")),
            available=available,
        )

    def validate(self, draft: GameDraftDTO) -> list[str]:
        """Returns every violation found, in field order. An empty list means the draft is valid."""
        errors: list[str] = []

        if draft.title == "":
            errors.append(TITLE_REQUIRED)
        if draft.platform == "":
            errors.append(PLATFORM_REQUIRED)
        if not is_digits(draft.category_id):
            errors.append(CATEGORY_ID_INVALID)
        if not is_numeric(draft.price):
            errors.append(PRICE_INVALID)
        if not is_digits(draft.stock):
            errors.append(STOCK_INVALID)
        if draft.available not in (0, 1):
            errors.append(AVAILABLE_INVALID)

        return errors

    def ensure_valid(self, draft: GameDraftDTO) -> None:
        """Raises ValidationError carrying all violations when the draft is invalid."""
        errors = self.validate(draft)
        if errors:
            logger.debug(f"Draft '{draft.title}' failed validation with {len(errors)} error(s)")
            raise ValidationError(errors)
