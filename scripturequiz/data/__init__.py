"""Data handling modules for scripturequiz."""

from .schemas import CATEGORIES, Question
from .loader import build_questions, load_questions
from .repository import (
    QuestionRepository,
    by_category,
    daily_sample,
    default_repository,
    load_all,
    random_sample,
)

__all__ = [
    "CATEGORIES",
    "Question",
    "QuestionRepository",
    "build_questions",
    "load_questions",
    "default_repository",
    "load_all",
    "by_category",
    "random_sample",
    "daily_sample",
]
