"""Abstract repository interfaces for the storage layer."""

from abc import ABC, abstractmethod

from models import Lesson


class LessonRepository(ABC):
    """Abstract interface for lesson storage."""

    @abstractmethod
    def get_all(self) -> list[Lesson]:
        """Load all lessons.

        Returns:
            List of all valid lessons in the repository, ordered by ID.
        """
        pass

    @abstractmethod
    def get_by_id(self, lesson_id: str) -> Lesson | None:
        """Load a single lesson by ID.

        Args:
            lesson_id: The lesson ID.

        Returns:
            The lesson, or None if not found.

        Raises:
            ValueError: If the stored lesson is malformed.
        """
        pass

    @abstractmethod
    def save(self, lesson: Lesson) -> None:
        """Save a lesson, replacing any lesson with the same ID.

        Args:
            lesson: The lesson to save.
        """
        pass

    def list_ids(self) -> list[str]:
        """Return the IDs of all valid lessons."""
        return [lesson.id for lesson in self.get_all()]
