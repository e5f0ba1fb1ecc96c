"""Data Transfer Objects for Game catalog data."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class SearchMode(str, Enum):
    """How the catalog store combines search keywords."""

    AND = "AND"
    OR = "OR"


@dataclass
class GameDTO:
    """DTO for a persisted game as returned by the catalog store."""

    id: int
    title: str
    platform: str
    category_id: int
    description: str = ""
    price: float = 0.0
    stock: int = 0
    available: int = 1


@dataclass
class GameDraftDTO:
    """DTO for a submitted, not yet validated game (create form input)."""

    title: str = ""
    platform: str = ""
    category_id: str = ""
    description: str = ""
    price: str = ""
    stock: str = ""
    available: int = 1

    def to_prefill(self) -> dict[str, Any]:
        """Returns the field map used to re-display the form, values exactly as submitted."""
        return {
            "title": self.title,
            "platform": self.platform,
            "category_id": self.category_id,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
            "available": self.available,
        }

    def to_payload(self) -> dict[str, Any]:
        """Returns the persistence payload. Only call on a draft that passed validation."""
        return {
            "title": self.title,
            "platform": self.platform,
            "category_id": int(self.category_id),
            "description": self.description,
            "price": float(self.price),
            "stock": int(self.stock),
            "available": self.available,
        }


@dataclass
class RequestDTO:
    """DTO for an inbound request: verb, form fields and query parameters."""

    method: str = "GET"
    form: dict[str, Any] = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)

    @property
    def is_submission(self) -> bool:
        return self.method.upper() == "POST"


@dataclass
class RedirectDTO:
    """DTO for a redirect instruction produced instead of a rendered view."""

    game_id: int
    location: Optional[str] = None
