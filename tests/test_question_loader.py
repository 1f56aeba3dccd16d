# Area: Shared Tests
"""Tests for reading question records from local JSON files."""

import json
import random
from pathlib import Path

import pytest
from trivia_duel.errors import NotFoundError
from trivia_duel.question_loader import questions_needed, read_questions_from_json

SAMPLE_FILE = Path(__file__).resolve().parent.parent / "data" / "questions-sample.json"


def record(difficulty="easy", qtype="boolean", text="Q"):
    return {
        "text": text,
        "category": "General",
        "type": qtype,
        "difficulty": difficulty,
        "correct_answer": "True",
        "incorrect_answers": ["False"],
    }


def write_json(tmp_path, data):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestReadQuestions:
    """Tests for read_questions_from_json."""

    def test_reads_questions_key(self, tmp_path):
        """Test that a "questions" list is read."""
        path = write_json(tmp_path, {"questions": [record(), record()]})
        assert len(read_questions_from_json(path)) == 2

    def test_reads_opentdb_results(self, tmp_path):
        """Test that an OpenTDB "results" list is read."""
        path = write_json(tmp_path, {"response_code": 0, "results": [record()]})
        assert len(read_questions_from_json(path)) == 1

    def test_reads_bare_list(self, tmp_path):
        """Test that a bare list is read and non-dict entries dropped."""
        path = write_json(tmp_path, [record(), "junk", record()])
        assert len(read_questions_from_json(path)) == 2

    def test_filters(self, tmp_path):
        """Test filtering by difficulty and type."""
        records = [
            record("easy", "boolean", "a"),
            record("hard", "boolean", "b"),
            record("hard", "multiple", "c"),
        ]
        path = write_json(tmp_path, records)
        hard = read_questions_from_json(path, difficulty="hard")
        assert {r["text"] for r in hard} == {"b", "c"}
        hard_bool = read_questions_from_json(path, difficulty="hard", question_type="boolean")
        assert [r["text"] for r in hard_bool] == ["b"]

    def test_seeded_shuffle_is_repeatable(self, tmp_path):
        """Test that the same seed gives the same order."""
        path = write_json(tmp_path, [record(text=str(i)) for i in range(10)])
        a = read_questions_from_json(path, rng=random.Random(4))
        b = read_questions_from_json(path, rng=random.Random(4))
        assert [r["text"] for r in a] == [r["text"] for r in b]

    def test_html_entities_left_encoded(self, tmp_path):
        """Test that the loader leaves HTML entities for the pool builder."""
        path = write_json(tmp_path, [record(text="Tom &amp; Jerry")])
        assert read_questions_from_json(path)[0]["text"] == "Tom &amp; Jerry"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Could not read questions"):
            read_questions_from_json(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        """Test that invalid JSON raises NotFoundError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(NotFoundError):
            read_questions_from_json(str(path))

    def test_no_question_list(self, tmp_path):
        """Test that a file without a question list raises NotFoundError."""
        path = write_json(tmp_path, {"questions": "nope"})
        with pytest.raises(NotFoundError, match="no 'questions' list"):
            read_questions_from_json(path)

    def test_bundled_sample_file(self):
        """Test that the bundled sample file covers a default match."""
        records = read_questions_from_json(str(SAMPLE_FILE))
        assert len(records) >= questions_needed(5)


def test_questions_needed_adds_skip_buffer():
    """Test that the skip buffer is added to the budget."""
    assert questions_needed(5) == 9
