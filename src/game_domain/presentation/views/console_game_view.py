# src/game_domain/presentation/views/console_game_view.py
"""Rich console implementation of the game views."""

from typing import Any, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.common.dtos.game_dtos import GameDTO
from src.game_domain.presentation.views.game_view import IGameView

FORM_FIELDS = (
    ("title", "Title"),
    ("platform", "Platform"),
    ("category_id", "Category ID"),
    ("description", "Description"),
    ("price", "Price"),
    ("stock", "Stock"),
    ("available", "Available"),
)


class ConsoleGameView(IGameView):
    """Renders catalog pages as rich tables and panels on a console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def _games_table(self, title: str, games: Sequence[GameDTO]) -> Table:
        table = Table(title=Text(title), show_lines=False)
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Title", style="bold")
        table.add_column("Platform")
        table.add_column("Price", justify="right")
        table.add_column("Stock", justify="right")
        table.add_column("Available", justify="center")

        for game in games:
            table.add_row(
                str(game.id),
                Text(game.title),
                Text(game.platform),
                f"{game.price:.2f}",
                str(game.stock),
                "yes" if game.available else "no",
            )
        return table

    def render_list(self, games: Sequence[GameDTO]) -> None:
        if not games:
            self.console.print("No games in the catalog.")
            return
        self.console.print(self._games_table("All Games", games))

    def render_detail(self, game: GameDTO) -> None:
        body = Table.grid(padding=(0, 2))
        body.add_column(style="bold")
        body.add_column()
        body.add_row("ID", str(game.id))
        body.add_row("Platform", Text(game.platform))
        body.add_row("Category ID", str(game.category_id))
        body.add_row("Price", f"{game.price:.2f}")
        body.add_row("Stock", str(game.stock))
        body.add_row("Available", "yes" if game.available else "no")
        body.add_row("Description", Text(game.description or "-"))
        self.console.print(Panel(body, title=Text(game.title), expand=False))

    def render_create_form(self, errors: list[str], prefill: dict[str, Any]) -> None:
        for error in errors:
            self.console.print(Text(f"- {error}", style="red"))

        form = Table(title="Add a Game", show_header=False)
        form.add_column(style="bold")
        form.add_column()
        for key, label in FORM_FIELDS:
            form.add_row(label, Text(str(prefill.get(key, ""))))
        self.console.print(form)

    def render_search_results(self, query: str, games: Sequence[GameDTO]) -> None:
        title = f"Search results for '{query}'"
        if not games:
            self.console.print(Text(f"{title}: no games found."))
            return
        self.console.print(self._games_table(title, games))

    def render_error(self, message: str) -> None:
        self.console.print(Panel(Text(message), title="Error", style="red", expand=False))
