"""Storage layer for the Swedish tutor.

Provides the lesson repository interface with two implementations: a
directory of JSON lesson files (the editor's export format) and a SQLite
database.
"""

from pathlib import Path

from .base import LessonRepository
from .json_files import JsonLessonRepository, load_lesson_file
from .sqlite import SQLiteLessonRepository
from .connection import get_connection, init_schema, DEFAULT_DB_PATH, DEFAULT_LESSON_DIR

__all__ = [
    # Abstract interfaces
    "LessonRepository",
    # Implementations
    "JsonLessonRepository",
    "SQLiteLessonRepository",
    "load_lesson_file",
    # Connection utilities
    "get_connection",
    "init_schema",
    "DEFAULT_DB_PATH",
    "DEFAULT_LESSON_DIR",
    # Factory functions
    "get_lesson_repo",
    "get_sqlite_lesson_repo",
]


def get_lesson_repo(lesson_dir: Path = DEFAULT_LESSON_DIR) -> LessonRepository:
    """Get a LessonRepository reading JSON lesson files."""
    return JsonLessonRepository(lesson_dir)


def get_sqlite_lesson_repo(db_path: Path = DEFAULT_DB_PATH) -> LessonRepository:
    """Get a LessonRepository backed by SQLite, creating the schema if needed."""
    init_schema(db_path)
    return SQLiteLessonRepository(db_path)
