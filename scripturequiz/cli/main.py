from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

import yaml

from scripturequiz.config import AppConfig, ConfigError
from scripturequiz.data.repository import DAILY_COUNT, QuestionRepository, default_repository
from scripturequiz.statistical.position_bias import analyze_position_bias
from scripturequiz.utils.determinism import set_determinism
from scripturequiz.utils.logging_config import configure_logging
from scripturequiz.utils.validation import DataIntegrityError, InsufficientDataError

logger = logging.getLogger("scripturequiz.cli")

OPTION_LABELS = "ABCD"


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from None


def _load_config(path: str | None) -> AppConfig:
    if path is None:
        return AppConfig.from_env()
    return AppConfig.from_file(path)


def _repository(source: str | None) -> QuestionRepository:
    if source:
        return QuestionRepository.from_file(source)
    return default_repository()


def _print_question(number: int, question, show_answer: bool) -> None:
    print(f"{number}. [{question.category}] {question.text}")
    for index, (label, option) in enumerate(zip(OPTION_LABELS, question.options)):
        marker = "*" if show_answer and question.is_correct(index) else " "
        print(f"   {marker} {label}) {option}")
    if show_answer and question.reference:
        print(f"     ({question.reference})")


def _cmd_list(repo: QuestionRepository, args: argparse.Namespace) -> int:
    questions = repo.by_category(args.category) if args.category else repo.load_all()
    if not questions:
        print(f"No questions in category '{args.category}'")
        return 0
    for i, q in enumerate(questions, 1):
        _print_question(i, q, show_answer=args.show_answers)
    return 0


def _cmd_categories(repo: QuestionRepository, args: argparse.Namespace) -> int:
    counts = repo.category_counts()
    width = max(len(c) for c in counts)
    for category, count in counts.items():
        print(f"{category:<{width}}  {count}")
    print(f"{'Total':<{width}}  {len(repo)}")
    return 0


def _cmd_sample(repo: QuestionRepository, args: argparse.Namespace) -> int:
    questions = repo.random_sample(args.n, rng=args.seed, category=args.category)
    for i, q in enumerate(questions, 1):
        _print_question(i, q, show_answer=args.show_answers)
    return 0


def _cmd_daily(repo: QuestionRepository, args: argparse.Namespace) -> int:
    day = args.date or date.today()
    questions = repo.daily_sample(args.n, day=day, category=args.category)
    print(f"Daily quiz for {day.isoformat()}:")
    for i, q in enumerate(questions, 1):
        _print_question(i, q, show_answer=args.show_answers)
    return 0


def _cmd_audit(repo: QuestionRepository, args: argparse.Namespace) -> int:
    output = Path(args.output) if args.output else None
    report = analyze_position_bias(
        repo.load_all(), significance_level=args.significance, save_path=output
    )
    print("Position bias audit:")
    print(f"  Questions: {report.total_questions}")
    print(f"  Correct-answer positions: {report.position_frequencies}")
    print(f"  Chi-square: {report.chi_square:.3f} (df={report.df}, p={report.p_value:.4f})")
    print(f"  Biased at alpha={report.significance_level}: {'yes' if report.is_biased else 'no'}")
    if report.hot_positions:
        print(f"  Over-represented positions: {report.hot_positions}")
    if output:
        print(f"  Report saved to: {output}")
    return 0


COMMANDS = {
    "list": _cmd_list,
    "categories": _cmd_categories,
    "sample": _cmd_sample,
    "daily": _cmd_daily,
    "audit": _cmd_audit,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scripturequiz",
        description="scripturequiz CLI - browse, sample and audit the Bible trivia question set",
        epilog="""Examples:
  # Show category counts
  scripturequiz categories

  # Reproducible five-question quiz from one category
  scripturequiz sample 5 --seed 42 --category People

  # Today's quiz, the same for everyone running it today
  scripturequiz daily

  # Audit correct-answer positions and save the report
  scripturequiz audit --output results/position_bias.json
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", default=None, help="Config file (JSON or YAML); defaults to environment settings")
    parser.add_argument("--source", default=None, help="Question file (JSON/JSONL/YAML) to use instead of the embedded set")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="Print questions")
    list_parser.add_argument("--category", help="Only questions in this category")
    list_parser.add_argument("--show-answers", action="store_true", help="Mark the correct option")

    subparsers.add_parser("categories", help="Print question counts per category")

    sample_parser = subparsers.add_parser("sample", help="Print a random sample of questions")
    sample_parser.add_argument("n", type=int, help="Number of questions")
    sample_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible sample")
    sample_parser.add_argument("--category", help="Sample only from this category")
    sample_parser.add_argument("--show-answers", action="store_true", help="Mark the correct option")

    daily_parser = subparsers.add_parser("daily", help="Print the quiz of the day")
    daily_parser.add_argument("n", type=int, nargs="?", default=DAILY_COUNT, help=f"Number of questions (default: {DAILY_COUNT})")
    daily_parser.add_argument("--date", type=_iso_date, default=None, help="Day to draw for, YYYY-MM-DD (default: today)")
    daily_parser.add_argument("--category", help="Draw only from this category")
    daily_parser.add_argument("--show-answers", action="store_true", help="Mark the correct option")

    audit_parser = subparsers.add_parser("audit", help="Audit correct-answer position balance")
    audit_parser.add_argument("--output", "-o", help="Output file path for the report (JSON)")
    audit_parser.add_argument("--significance", type=float, default=0.05, help="Significance level (default: 0.05)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        cfg = _load_config(args.config)
    except FileNotFoundError:
        print(f"Error: Config file '{args.config}' not found")
        return 1
    except (json.JSONDecodeError, yaml.YAMLError, ConfigError) as e:
        print(f"Error: Invalid config '{args.config or 'environment'}': {e}")
        return 1

    configure_logging(
        level="DEBUG" if args.verbose else cfg.logging.level,
        log_file=cfg.logging.log_file,
        structured=cfg.logging.structured,
    )
    set_determinism(
        seed=cfg.determinism.seed,
        python_hash_seed=cfg.determinism.python_hash_seed,
    )

    source = args.source or cfg.data.source
    try:
        repo = _repository(source)
        return COMMANDS[args.command](repo, args)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        logger.error("FileNotFoundError: %s", e)
        return 1
    except DataIntegrityError as e:
        print("Error: question set failed validation.")
        print(str(e))
        logger.error("DataIntegrityError: %s", e)
        return 4
    except InsufficientDataError as e:
        print(f"Error: {e}")
        logger.warning("InsufficientDataError: %s", e)
        return 3
    except ValueError as e:
        print(f"Error: {e}")
        logger.error("ValueError: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
