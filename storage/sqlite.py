"""SQLite implementation of the lesson repository."""

import logging
from pathlib import Path

from pydantic import ValidationError

from .base import LessonRepository
from .connection import get_connection, DEFAULT_DB_PATH
from models import Lesson

logger = logging.getLogger(__name__)


class SQLiteLessonRepository(LessonRepository):
    """SQLite implementation of LessonRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def get_all(self) -> list[Lesson]:
        """Load all lessons, skipping rows that no longer validate."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT * FROM lessons ORDER BY id")
            lessons = []
            for row in cursor.fetchall():
                try:
                    lessons.append(self._row_to_model(row))
                except ValueError as e:
                    logger.warning("Skipping lesson %s: %s", row["id"], e)
            return lessons
        finally:
            conn.close()

    def get_by_id(self, lesson_id: str) -> Lesson | None:
        """Load a single lesson by ID."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT * FROM lessons WHERE id = ?", (lesson_id,))
            row = cursor.fetchone()
            return self._row_to_model(row) if row else None
        finally:
            conn.close()

    def save(self, lesson: Lesson) -> None:
        """Insert or replace a lesson."""
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """INSERT OR REPLACE INTO lessons (id, title, word_class, body)
                VALUES (?, ?, ?, ?)""",
                (lesson.id, lesson.title, lesson.word_class, lesson.model_dump_json()),
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Saved lesson %s to %s", lesson.id, self.db_path)

    def _row_to_model(self, row) -> Lesson:
        """Convert a database row to a Lesson model."""
        try:
            return Lesson.model_validate_json(row["body"])
        except ValidationError as e:
            raise ValueError(f"Lesson {row['id']} is malformed: {e}") from e
