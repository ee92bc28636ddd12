"""Lessons stored as one JSON file per lesson in a directory.

This is the format the lesson editor exports: ``<lesson id>.json``.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from .base import LessonRepository
from .connection import DEFAULT_LESSON_DIR
from models import Lesson

logger = logging.getLogger(__name__)


def load_lesson_file(path: Path) -> Lesson:
    """Load and validate a single lesson file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a valid lesson.
    """
    text = path.read_text(encoding="utf-8")
    try:
        lesson = Lesson.model_validate_json(text)
    except ValidationError as e:
        raise ValueError(f"{path.name} is not a valid lesson: {e}") from e
    logger.info("Loaded lesson %s from %s", lesson.id, path)
    return lesson


class JsonLessonRepository(LessonRepository):
    """Directory of ``<id>.json`` lesson files."""

    def __init__(self, lesson_dir: Path = DEFAULT_LESSON_DIR):
        self.lesson_dir = lesson_dir

    def _path_for(self, lesson_id: str) -> Path:
        return self.lesson_dir / f"{lesson_id}.json"

    def get_all(self) -> list[Lesson]:
        if not self.lesson_dir.exists():
            return []
        lessons = []
        for path in sorted(self.lesson_dir.glob("*.json")):
            try:
                lessons.append(load_lesson_file(path))
            except ValueError as e:
                logger.warning("Skipping %s: %s", path.name, e)
        return lessons

    def get_by_id(self, lesson_id: str) -> Lesson | None:
        path = self._path_for(lesson_id)
        if not path.exists():
            return None
        return load_lesson_file(path)

    def save(self, lesson: Lesson) -> None:
        self.lesson_dir.mkdir(parents=True, exist_ok=True)
        path = self._path_for(lesson.id)
        path.write_text(
            lesson.model_dump_json(indent=2, by_alias=True), encoding="utf-8"
        )
        logger.info("Saved lesson %s to %s", lesson.id, path)
