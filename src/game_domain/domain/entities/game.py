"""Game entity."""

from dataclasses import dataclass


@dataclass
class Game:
    """Represents a catalog game whose fields passed validation when it was created."""

    title: str
    platform: str
    category_id: int
    description: str = ""
    price: float = 0.0
    stock: int = 0
    available: int = 1
    id: int | None = None  # Assigned by the catalog store

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if not self.title:
            raise ValueError("Title cannot be empty.")
        if not self.platform:
            raise ValueError("Platform cannot be empty.")
        if self.category_id < 0:
            raise ValueError("Category ID cannot be negative.")
        if self.price < 0:
            raise ValueError("Price cannot be negative.")
        if self.stock < 0:
            raise ValueError("Stock cannot be negative.")
        if self.available not in (0, 1):
            raise ValueError("Available must be 0 or 1.")
