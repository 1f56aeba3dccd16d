# Area: Shared Tests
"""Tests for trivia_duel._config — loading and validation."""

import json

import pytest
from trivia_duel._config import DEFAULTS, ENV_MAPPINGS, load_config, points_for, validate_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test that load_config without a file returns a copy of the defaults."""
        config = load_config()
        assert config == DEFAULTS
        assert config is not DEFAULTS

    def test_json_file_overrides_defaults(self, tmp_path):
        """Test that values in the JSON file override the defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"question_count": 8, "difficulty": "hard"}))
        config = load_config(str(path))
        assert config["question_count"] == 8
        assert config["difficulty"] == "hard"
        assert config["skips_per_player"] == 2

    def test_missing_file_falls_back_to_defaults(self, tmp_path, caplog):
        """Test that a missing config file logs a warning and keeps defaults."""
        config = load_config(str(tmp_path / "nope.json"))
        assert config == DEFAULTS
        assert "Config file not found" in caplog.text

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Test that TRIVIA_* variables override the JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"question_count": 8}))
        monkeypatch.setenv("TRIVIA_QUESTION_COUNT", "3")
        monkeypatch.setenv("TRIVIA_QUESTION_TYPE", "boolean")
        config = load_config(str(path))
        assert config["question_count"] == 3
        assert config["question_type"] == "boolean"


class TestValidateConfig:
    """Tests for validate_config."""

    def test_defaults_are_valid(self):
        """Test that the defaults pass validation."""
        validate_config(dict(DEFAULTS))

    @pytest.mark.parametrize(
        "key,value",
        [
            ("question_count", 0),
            ("question_count", -2),
            ("question_count", "5"),
            ("question_count", True),
            ("skips_per_player", -1),
            ("difficulty", "extreme"),
            ("question_type", "open"),
            ("questions_file", ""),
        ],
    )
    def test_invalid_values(self, key, value):
        """Test that an out-of-range value raises ValueError naming the key."""
        config = dict(DEFAULTS)
        config[key] = value
        with pytest.raises(ValueError, match=key):
            validate_config(config)


class TestPointsFor:
    """Tests for points_for."""

    @pytest.mark.parametrize(
        "difficulty,points",
        [("easy", 1), ("medium", 2), ("hard", 3), (None, 1)],
    )
    def test_points(self, difficulty, points):
        """Test the point value of each difficulty."""
        assert points_for(difficulty) == points
