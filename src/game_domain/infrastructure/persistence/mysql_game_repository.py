# src/game_domain/infrastructure/persistence/mysql_game_repository.py
"""MySQL implementation of the Game catalog repository."""

import logging
from typing import Any, Optional

import mysql.connector
from mysql.connector import Error

from src.common.config.settings import settings
from src.common.dtos.game_dtos import GameDTO, SearchMode
from src.common.exceptions.custom_exceptions import DatabaseError
from src.game_domain.domain.entities.game import Game
from src.game_domain.domain.repositories.game_repository import IGameRepository

logger = logging.getLogger(__name__)

GAME_COLUMNS = "id, title, platform, category_id, description, price, stock, available"

# Columns a search keyword is matched against
SEARCH_COLUMNS = ("title", "platform", "description")


class MySQLGameRepository(IGameRepository):
    """MySQL implementation of the Game Repository."""

    def __init__(self) -> None:
        """Initializes the repository."""
        self._connection = None

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    port=settings.DB_PORT,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    @staticmethod
    def _row_to_dto(row: dict[str, Any]) -> GameDTO:
        return GameDTO(
            id=int(row["id"]),
            title=row["title"],
            platform=row["platform"],
            category_id=int(row["category_id"]),
            description=row["description"] or "",
            price=float(row["price"]),
            stock=int(row["stock"]),
            available=int(row["available"]),
        )

    def create_tables(self) -> None:
        """Creates the games table if it does not exist."""
        create_games_table_query = """
        CREATE TABLE IF NOT EXISTS games (
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            title VARCHAR(255) NOT NULL,
            platform VARCHAR(100) NOT NULL,
            category_id INT UNSIGNED NOT NULL,
            description TEXT,
            price DECIMAL(10, 2) NOT NULL DEFAULT 0,
            stock INT UNSIGNED NOT NULL DEFAULT 0,
            available TINYINT(1) NOT NULL DEFAULT 1,
            INDEX idx_category_id (category_id),
            INDEX idx_title (title)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_games_table_query)
            conn.commit()
            logger.info("Games table checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating games table: {e}", original_exception=e)
        finally:
            cursor.close()

    def list_games(self) -> list[GameDTO]:
        """Retrieves all games ordered by id."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute(f"SELECT {GAME_COLUMNS} FROM games ORDER BY id")
            return [self._row_to_dto(row) for row in cursor.fetchall()]
        except Error as e:
            raise DatabaseError(f"Error fetching games: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_game_by_id(self, game_id: int) -> Optional[GameDTO]:
        """Retrieves a game by id, or None when it does not exist."""
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        game_dto = None
        try:
            cursor.execute(f"SELECT {GAME_COLUMNS} FROM games WHERE id = %s LIMIT 1", (game_id,))
            row = cursor.fetchone()
            if row:
                game_dto = self._row_to_dto(row)
        except Error as e:
            raise DatabaseError(f"Error fetching game id {game_id}: {e}", original_exception=e)
        finally:
            cursor.close()
        return game_dto

    def create_game(self, payload: dict[str, Any]) -> Optional[int]:
        """
        Inserts a game and returns the new id.

        Returns None when the payload breaks a Game invariant or the
        insert produced no id.
        """
        try:
            game = Game(**payload)
        except (TypeError, ValueError) as e:
            logger.warning(f"Refusing to insert invalid game payload: {e}")
            return None

        conn = self._get_connection()
        cursor = conn.cursor()

        insert_query = """
        INSERT INTO games
        (title, platform, category_id, description, price, stock, available)
        VALUES (%s, %s, %s, %s, %s, %s, %s)
        """
        params = (
            game.title,
            game.platform,
            game.category_id,
            game.description,
            game.price,
            game.stock,
            game.available,
        )

        try:
            cursor.execute(insert_query, params)
            conn.commit()
            new_id = cursor.lastrowid
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error inserting game '{game.title}': {e}", original_exception=e)
        finally:
            cursor.close()

        if not new_id:
            return None
        logger.info(f"Inserted game '{game.title}' with id {new_id}")
        return int(new_id)

    def search_games(self, terms: str, mode: SearchMode) -> list[GameDTO]:
        """
        Retrieves games matching every (AND) or any (OR) whitespace-separated keyword.

        A keyword matches when it appears in the title, platform or
        description. With no keywords every game is returned.
        """
        keywords = terms.split()
        joiner = " OR " if mode == SearchMode.OR else " AND "

        clauses = []
        params: list[str] = []
        for keyword in keywords:
            clauses.append("(" + " OR ".join(f"{column} LIKE %s" for column in SEARCH_COLUMNS) + ")")
            params.extend([f"%{keyword}%"] * len(SEARCH_COLUMNS))

        query = f"SELECT {GAME_COLUMNS} FROM games"
        if clauses:
            query += " WHERE " + joiner.join(clauses)
        query += " ORDER BY id"

        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute(query, params)
            return [self._row_to_dto(row) for row in cursor.fetchall()]
        except Error as e:
            raise DatabaseError(f"Error searching games for '{terms}' ({mode.value}): {e}", original_exception=e)
        finally:
            cursor.close()

    def close(self) -> None:
        """Closes the database connection if it is open."""
        if self._connection and self._connection.is_connected():
            self._connection.close()
        self._connection = None

    def __del__(self) -> None:
        """Closes the database connection when the object is destroyed."""
        self.close()
