# Area: Engine Tests
"""Tests for building Question entities from raw records."""

import logging
import random

import pytest
from trivia_duel._engine.category import CategoryRegistry
from trivia_duel._engine.enums import Difficulty, QuestionKind
from trivia_duel._engine.pool_builder import RawQuestionRecord, build_options, build_questions


def mc_record(**overrides):
    record = {
        "text": "Capital of France?",
        "category": "Geography",
        "type": "multiple",
        "difficulty": "easy",
        "correct_answer": "Paris",
        "incorrect_answers": ["Lyon", "Nice", "Lille"],
    }
    record.update(overrides)
    return record


def bool_record(**overrides):
    record = {
        "text": "Water boils at 100C at sea level.",
        "category": "Science",
        "type": "boolean",
        "correct_answer": "True",
        "incorrect_answers": ["False"],
    }
    record.update(overrides)
    return record


class TestBuildQuestions:
    """Tests for build_questions."""

    def test_partitions_by_type(self):
        """Test that records build the matching question kind."""
        questions = build_questions([mc_record(), bool_record()], CategoryRegistry())
        assert [q.kind for q in questions] == [QuestionKind.MULTIPLE, QuestionKind.BOOLEAN]

    def test_boolean_answer_parsed(self):
        """Test that boolean answers parse case-insensitively."""
        questions = build_questions(
            [bool_record(), bool_record(correct_answer="false")], CategoryRegistry()
        )
        assert [q.correct_answer for q in questions] == [True, False]

    def test_html_entities_decoded(self):
        """Test that HTML entities are decoded in every text field."""
        record = mc_record(
            text="Who wrote &quot;Hamlet&quot;?",
            category="Arts &amp; Literature",
            correct_answer="Shakespeare&#039;s",
            incorrect_answers=["Marlowe &amp; Co"],
        )
        question = build_questions([record], CategoryRegistry())[0]
        assert question.text == 'Who wrote "Hamlet"?'
        assert question.category.name == "Arts & Literature"
        texts = {option.text for option in question.options.values()}
        assert texts == {"Shakespeare's", "Marlowe & Co"}

    def test_opentdb_question_field_accepted(self):
        """Test that the OpenTDB "question" key is accepted for the text."""
        record = mc_record()
        record["question"] = record.pop("text")
        question = build_questions([record], CategoryRegistry())[0]
        assert question.text == "Capital of France?"

    def test_categories_shared_through_registry(self):
        """Test that questions of one category share a Category object."""
        registry = CategoryRegistry()
        a, b = build_questions([mc_record(), mc_record(text="Capital of Spain?")], registry)
        assert a.category is b.category
        assert len(registry) == 1

    @pytest.mark.parametrize(
        "difficulty,points",
        [("easy", 1), ("medium", 2), ("hard", 3), (None, 1)],
    )
    def test_points_follow_difficulty(self, difficulty, points):
        """Test that difficulty sets the point value."""
        question = build_questions([mc_record(difficulty=difficulty)], CategoryRegistry())[0]
        assert question.points == points
        expected = Difficulty(difficulty) if difficulty else None
        assert question.difficulty == expected


class TestInvalidRecords:
    """Invalid records are skipped with a warning, not fatal."""

    @pytest.mark.parametrize(
        "bad",
        [
            {k: v for k, v in mc_record().items() if k != "category"},
            {k: v for k, v in mc_record().items() if k != "correct_answer"},
            mc_record(type="open"),
            mc_record(difficulty="extreme"),
            mc_record(incorrect_answers=[]),
            bool_record(correct_answer="Maybe"),
            mc_record(text=""),
        ],
    )
    def test_bad_record_skipped(self, bad, caplog):
        """Test that an invalid record is skipped with a warning."""
        with caplog.at_level(logging.WARNING, logger="trivia_duel.pool"):
            questions = build_questions([bad, mc_record()], CategoryRegistry())
        assert len(questions) == 1
        assert "Skipping question record #0" in caplog.text

    def test_validated_record_passes_through(self):
        """Test that an already validated record is accepted."""
        record = RawQuestionRecord.model_validate(bool_record())
        questions = build_questions([record], CategoryRegistry())
        assert questions[0].correct_answer is True


class TestBuildOptions:
    """Tests for option label permutation."""

    def test_labels_are_one_to_n_with_one_correct(self):
        """Test that labels run 1..N with exactly one correct option."""
        options = build_options("Paris", ["Lyon", "Nice", "Lille"], random.Random(3))
        assert list(options) == [1, 2, 3, 4]
        assert sum(o.is_correct for o in options.values()) == 1
        assert {o.text for o in options.values()} == {"Paris", "Lyon", "Nice", "Lille"}

    def test_same_seed_same_labels(self):
        """Test that the same seed gives the same labels."""
        a = build_options("Paris", ["Lyon", "Nice", "Lille"], random.Random(11))
        b = build_options("Paris", ["Lyon", "Nice", "Lille"], random.Random(11))
        assert a == b

    def test_correct_answer_reaches_every_label(self):
        """Test that the correct answer can land on every label."""
        rng = random.Random(2024)
        seen = set()
        for _ in range(200):
            options = build_options("Paris", ["Lyon", "Nice", "Lille"], rng)
            seen.add(next(label for label, o in options.items() if o.is_correct))
        assert seen == {1, 2, 3, 4}
