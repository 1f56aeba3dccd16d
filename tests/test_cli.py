# Area: Shared Tests
"""Tests for the command-line interface."""

import json

import pytest
from trivia_duel._config import ENV_MAPPINGS
from trivia_duel._engine.enums import MatchStatus
from trivia_duel.cli import build_config, main, parse_args, setup_match
from trivia_duel.errors import NotFoundError


def bool_record(text="Sky is blue."):
    return {
        "text": text,
        "category": "General",
        "type": "boolean",
        "correct_answer": "True",
        "incorrect_answers": ["False"],
    }


def write_questions(tmp_path, count):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps({"questions": [bool_record(f"Q{i}") for i in range(count)]}))
    return str(path)


def scripted(answers):
    """Stand-in for input(); raises EOFError once the script runs out."""
    it = iter(answers)

    def ask(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return ask


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)
    # keep load_dotenv() from picking up a stray .env
    monkeypatch.chdir(tmp_path)


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        """Test that unset flags parse to None."""
        args = parse_args([])
        assert args.count is None
        assert args.file is None
        assert args.verbose is False

    def test_all_flags(self):
        """Test that every flag is parsed into the namespace."""
        args = parse_args([
            "-c", "7", "-f", "q.json", "-d", "hard", "-t", "boolean",
            "--seed", "3", "--log-file", "out.log", "-v",
        ])
        assert args.count == 7
        assert args.file == "q.json"
        assert args.difficulty == "hard"
        assert args.question_type == "boolean"
        assert args.seed == 3
        assert args.log_file == "out.log"
        assert args.verbose is True

    def test_rejects_unknown_difficulty(self):
        """Test that argparse rejects a difficulty outside the allowed choices."""
        with pytest.raises(SystemExit):
            parse_args(["--difficulty", "extreme"])


class TestBuildConfig:
    """Tests for merging config layers with CLI flags."""

    def test_cli_overrides_config(self, monkeypatch):
        """Test that a command line value beats the environment."""
        monkeypatch.setenv("TRIVIA_QUESTION_COUNT", "9")
        config = build_config(parse_args(["--count", "4"]))
        assert config["question_count"] == 4

    def test_unset_flags_keep_lower_layers(self, monkeypatch):
        """Test that flags left unset keep environment and default values."""
        monkeypatch.setenv("TRIVIA_QUESTION_COUNT", "9")
        config = build_config(parse_args([]))
        assert config["question_count"] == 9
        assert config["questions_file"] == "data/questions-sample.json"


class TestSetupMatch:
    """Tests for setup_match."""

    def _config(self, path, count=2):
        config = build_config(parse_args(["--file", path, "--count", str(count), "--seed", "1"]))
        return config

    def test_registers_players_and_starts(self, tmp_path):
        """Test that setup_match re-asks for empty names and starts the match."""
        path = write_questions(tmp_path, 8)
        service = setup_match(self._config(path), ask=scripted(["", "  Alice ", "Bob"]))

        assert [p.name for p in service.state.players] == ["Alice", "Bob"]
        assert service.state.status is MatchStatus.IN_PROGRESS
        assert service.state.total_rounds == 2
        # budget plus skip buffer
        assert len(service.state.pool) == 6

    def test_warns_when_file_is_short(self, tmp_path):
        """Test that a short question file produces a warning."""
        path = write_questions(tmp_path, 1)
        output = []
        setup_match(self._config(path, count=3), ask=scripted(["A", "B"]), say=output.append)
        assert "Only 1 usable questions found" in "\n".join(output)

    def test_missing_file(self, tmp_path):
        """Test that a missing question file raises NotFoundError."""
        config = self._config(str(tmp_path / "missing.json"))
        with pytest.raises(NotFoundError):
            setup_match(config, ask=scripted(["A", "B"]))


class TestMain:
    """Tests for the main() entry point."""

    def test_invalid_count(self, capsys):
        """Test that a non-positive count exits with 1."""
        assert main(["--count", "0"]) == 1
        assert "question_count" in capsys.readouterr().err

    def test_non_numeric_env_count(self, monkeypatch, capsys):
        """Test that a non-numeric TRIVIA_QUESTION_COUNT exits with 1 instead of a traceback."""
        monkeypatch.setenv("TRIVIA_QUESTION_COUNT", "abc")
        assert main([]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_config_file(self, tmp_path, capsys):
        """Test that an unreadable --config JSON file exits with 1."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json")
        assert main(["--config", str(config_path)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_eof_during_name_prompt(self, tmp_path, monkeypatch):
        """Test that input ending while names are asked aborts with 130."""
        path = write_questions(tmp_path, 2)
        monkeypatch.setattr("builtins.input", scripted(["Alice"]))
        assert main(["--file", path]) == 130

    def test_missing_question_file(self, tmp_path, monkeypatch):
        """Test that a missing question file exits with 1."""
        monkeypatch.setattr("builtins.input", scripted(["Alice", "Bob"]))
        assert main(["--file", str(tmp_path / "missing.json")]) == 1

    def test_full_match(self, tmp_path, monkeypatch, capsys):
        """Test that a scripted match runs to the end and exits with 0."""
        path = write_questions(tmp_path, 2)
        monkeypatch.setattr("builtins.input", scripted(["Alice", "Bob", "true", "false", "true"]))
        assert main(["--file", path, "--count", "2", "--seed", "1"]) == 0
        assert "Alice with 2 points!" in capsys.readouterr().out

    def test_aborted_match(self, tmp_path, monkeypatch):
        """Test that input ending mid-match aborts with 130."""
        path = write_questions(tmp_path, 2)
        monkeypatch.setattr("builtins.input", scripted(["Alice", "Bob"]))
        assert main(["--file", path, "--count", "2"]) == 130

    def test_writes_json_log(self, tmp_path, monkeypatch):
        """Test that --log-file writes one JSON object per line."""
        path = write_questions(tmp_path, 2)
        log_file = tmp_path / "logs" / "match.log"
        monkeypatch.setattr("builtins.input", scripted(["Alice", "Bob", "true", "true"]))
        main(["--file", path, "--count", "2", "--log-file", str(log_file)])

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert any("Player joined: Alice" in line["message"] for line in lines)
        assert all(line["level"] in ("INFO", "WARNING", "ERROR") for line in lines)
