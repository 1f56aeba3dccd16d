# Area: Shared
"""
trivia_duel.cli — Command-line interface
========================================

Provides the CLI entry point for a hot-seat match.

Usage:
    python -m trivia_duel                               # 5 questions, sample file
    python -m trivia_duel --count 10 --file my.json     # custom file
    python -m trivia_duel -d hard -t boolean            # filter questions

Settings can also come from a JSON config file (--config), from
TRIVIA_* environment variables, or from a .env file.
"""

import argparse
import json
import logging
import random
import sys
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv

from ._config import VALID_DIFFICULTIES, VALID_QUESTION_TYPES, load_config, validate_config
from ._engine import MatchHistory, MatchService, Player
from ._shared.display import HOW_TO_PLAY, styled
from ._shared.logging_config import log_error, setup_logging
from .errors import TriviaDuelError
from .game_flow import GameFlow
from .question_loader import questions_needed, read_questions_from_json

logger = logging.getLogger("trivia_duel")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="trivia-duel",
        description="Trivia Duel - a two-player hot-seat trivia match",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  trivia-duel
  trivia-duel --count 10 --file data/questions.json
  trivia-duel --difficulty hard --type multiple
  TRIVIA_QUESTION_COUNT=3 trivia-duel
        """,
    )

    parser.add_argument(
        "-c", "--count",
        type=int,
        help="Number of questions to play (default: 5)",
    )
    parser.add_argument(
        "-f", "--file",
        type=str,
        help="Path to a local JSON file with questions",
    )
    parser.add_argument(
        "-d", "--difficulty",
        choices=VALID_DIFFICULTIES,
        help="Only use questions of this difficulty",
    )
    parser.add_argument(
        "-t", "--type",
        dest="question_type",
        choices=VALID_QUESTION_TYPES,
        help="Only use questions of this type",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for question order and option labels",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write a JSON log of the match to this file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show engine log messages on the terminal",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge config file / environment with command line overrides."""
    config = load_config(args.config)
    overrides = {
        "question_count": args.count,
        "questions_file": args.file,
        "difficulty": args.difficulty,
        "question_type": args.question_type,
        "seed": args.seed,
        "log_file": args.log_file,
    }
    config.update({k: v for k, v in overrides.items() if v is not None})
    return config


def setup_match(
    config: Dict[str, Any],
    ask: Callable[[str], str],
    say: Callable[[str], None] = print,
) -> MatchService:
    """
    Register both players, load the question pool and start the match.

    Raises:
        TriviaDuelError: If players or questions cannot be set up
    """
    rng = random.Random(config.get("seed"))
    service = MatchService(rng=rng)

    for ordinal in ("first", "second"):
        name = ""
        while not name:
            name = ask(f"Enter the name of the {ordinal} player: ").strip()
        service.add_player(Player.create(name, skips=config["skips_per_player"]))

    round_budget = config["question_count"]
    records = read_questions_from_json(
        config["questions_file"],
        difficulty=config.get("difficulty"),
        question_type=config.get("question_type"),
        rng=rng,
    )
    added = service.create_pool(records[: questions_needed(round_budget)], round_budget)
    if added < round_budget:
        say(styled(
            "warning",
            f"Only {added} usable questions found; the match may end early.",
        ))

    service.start()
    return service


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = build_config(args)
        validate_config(config)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        log_file_path=config.get("log_file"),
        level=logging.INFO if args.verbose else logging.WARNING,
    )

    print(HOW_TO_PLAY)
    try:
        try:
            service = setup_match(config, ask=input)
        except TriviaDuelError as e:
            log_error(e)
            print(styled("error", "Failed to set up the match. Please check your question file."), file=sys.stderr)
            return 1

        history = MatchHistory(service)
        history.backup()
        GameFlow(service, ask=input, history=history).play()
    except (KeyboardInterrupt, EOFError):
        print(styled("warning", "\nMatch aborted."))
        return 130
    return 0
