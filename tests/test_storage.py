"""Unit tests for the lesson storage layer."""

import json

import pytest

from storage import (
    JsonLessonRepository,
    SQLiteLessonRepository,
    get_connection,
    get_sqlite_lesson_repo,
    init_schema,
    load_lesson_file,
)


@pytest.fixture
def lesson_dir(tmp_path, sample_lesson):
    """A lesson directory with one valid and one broken lesson."""
    directory = tmp_path / "lessons"
    directory.mkdir()
    (directory / f"{sample_lesson.id}.json").write_text(
        sample_lesson.model_dump_json(), encoding="utf-8"
    )
    (directory / "trasig.json").write_text(
        json.dumps({"id": "trasig", "moments": [{"id": "m1", "type": "okänd"}]}),
        encoding="utf-8",
    )
    return directory


class TestJsonLessonRepository:
    """Tests for the JSON file repository."""

    def test_get_by_id(self, lesson_dir, sample_lesson):
        repo = JsonLessonRepository(lesson_dir)

        assert repo.get_by_id(sample_lesson.id) == sample_lesson

    def test_get_missing(self, lesson_dir):
        assert JsonLessonRepository(lesson_dir).get_by_id("saknas") is None

    def test_get_malformed_raises(self, lesson_dir):
        with pytest.raises(ValueError, match="not a valid lesson"):
            JsonLessonRepository(lesson_dir).get_by_id("trasig")

    def test_get_all_skips_malformed(self, lesson_dir, sample_lesson):
        repo = JsonLessonRepository(lesson_dir)

        assert repo.list_ids() == [sample_lesson.id]

    def test_get_all_missing_directory(self, tmp_path):
        assert JsonLessonRepository(tmp_path / "nope").get_all() == []

    def test_save_then_load(self, tmp_path, sample_lesson):
        repo = JsonLessonRepository(tmp_path / "out")
        repo.save(sample_lesson)

        assert load_lesson_file(tmp_path / "out" / f"{sample_lesson.id}.json") == sample_lesson

    def test_bundled_sample_lesson_loads(self):
        """The lesson shipped in data/lessons validates."""
        lesson = JsonLessonRepository().get_by_id("adjektiv-1")

        assert lesson is not None
        assert len(lesson.moments) == 3


class TestSQLiteLessonRepository:
    """Tests for the SQLite repository."""

    def test_save_and_get(self, tmp_path, sample_lesson):
        repo = get_sqlite_lesson_repo(tmp_path / "lessons.db")
        repo.save(sample_lesson)

        assert repo.get_by_id(sample_lesson.id) == sample_lesson
        assert repo.get_by_id("saknas") is None

    def test_save_replaces(self, tmp_path, sample_lesson):
        repo = get_sqlite_lesson_repo(tmp_path / "lessons.db")
        repo.save(sample_lesson)
        repo.save(sample_lesson.model_copy(update={"title": "Ny titel"}))

        lessons = repo.get_all()
        assert len(lessons) == 1
        assert lessons[0].title == "Ny titel"

    def test_malformed_row_skipped_in_get_all(self, tmp_path, sample_lesson):
        db_path = tmp_path / "lessons.db"
        init_schema(db_path)
        repo = SQLiteLessonRepository(db_path)
        repo.save(sample_lesson)

        conn = get_connection(db_path)
        try:
            conn.execute(
                "INSERT INTO lessons (id, title, word_class, body) VALUES (?, ?, ?, ?)",
                ("trasig", "", "", "{not json"),
            )
            conn.commit()
        finally:
            conn.close()

        assert repo.list_ids() == [sample_lesson.id]
        with pytest.raises(ValueError, match="malformed"):
            repo.get_by_id("trasig")
