"""Unit tests for word bank construction."""

import random

from exercises.template import parse_template
from exercises.word_pool import WordPool, build_word_pool


class TestBuildWordPool:
    """Tests for build_word_pool."""

    def test_contains_answers_and_distractors(self):
        sentences = [parse_template("Den [stora] hunden sprang")]

        pool = build_word_pool(sentences, ["lilla"], random.Random(0))

        assert sorted(pool) == ["lilla", "stora"]

    def test_answers_are_deduplicated(self):
        """The same answer in two blanks appears once in the bank."""
        sentences = [
            parse_template("Hunden [springer] fort"),
            parse_template("Katten [springer] också"),
        ]

        pool = build_word_pool(sentences, [], random.Random(0))

        assert pool == ["springer"]

    def test_distractor_equal_to_answer_is_kept(self):
        """Collisions are not resolved here; config validation rejects them."""
        sentences = [parse_template("Den [stora] hunden")]

        pool = build_word_pool(sentences, ["stora"], random.Random(0))

        assert pool == ["stora", "stora"]

    def test_shuffle_is_seeded(self):
        sentences = [parse_template("[a] [b] [c] [d] [e] [f]")]

        first = build_word_pool(sentences, ["x", "y"], random.Random(7))
        second = build_word_pool(sentences, ["x", "y"], random.Random(7))

        assert first == second
        assert sorted(first) == ["a", "b", "c", "d", "e", "f", "x", "y"]

    def test_no_sentences(self):
        assert build_word_pool([], [], random.Random(0)) == []


class TestWordPool:
    """Tests for the WordPool container."""

    def test_take_removes_one_occurrence(self):
        pool = WordPool(["stora", "lilla", "stora"])

        assert pool.take("stora") is True
        assert pool.words == ["lilla", "stora"]

    def test_take_missing_word(self):
        pool = WordPool(["lilla"])

        assert pool.take("stora") is False
        assert pool.words == ["lilla"]

    def test_give_back_appends(self):
        pool = WordPool(["lilla"])
        pool.give_back("stora")

        assert pool.words == ["lilla", "stora"]
        assert "stora" in pool
        assert len(pool) == 2

    def test_words_is_a_snapshot(self):
        pool = WordPool(["lilla"])
        snapshot = pool.words
        snapshot.append("stora")

        assert pool.words == ["lilla"]
