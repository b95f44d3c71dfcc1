"""Read-only question repository."""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .loader import build_questions, load_questions
from .questions import QUESTION_DATA
from .schemas import CATEGORIES, Question
from ..config import get_data_config
from ..security import make_date_seed
from ..utils.io import RngLike, sample_indices
from ..utils.validation import DataIntegrityError, InsufficientDataError, find_duplicates

logger = logging.getLogger(__name__)

DAILY_COUNT = 10


class QuestionRepository:
    """Immutable, ordered collection of questions.

    Build one with ``from_records`` or ``from_file``; after construction the
    contents never change, so instances can be shared between readers.
    """

    def __init__(self, questions: Sequence[Question]):
        self._questions: Tuple[Question, ...] = tuple(questions)
        if not self._questions:
            raise DataIntegrityError("Question set is empty")

        duplicates = find_duplicates([(i, q.id) for i, q in enumerate(self._questions)])
        if duplicates:
            logger.error("Question set contains %d duplicate ids", len(duplicates))
            raise DataIntegrityError("Question set contains duplicate ids", errors=duplicates)

        self._by_id: Dict[str, Question] = {q.id: q for q in self._questions}
        grouped: Dict[str, List[Question]] = {}
        for q in self._questions:
            grouped.setdefault(q.category, []).append(q)
        self._by_category: Dict[str, Tuple[Question, ...]] = {
            category: tuple(items) for category, items in grouped.items()
        }

    @classmethod
    def from_records(
        cls,
        records: Sequence[Mapping[str, Any]],
        allowed_categories: Optional[Sequence[str]] = CATEGORIES,
    ) -> "QuestionRepository":
        repo = cls(build_questions(records, allowed_categories))
        logger.info("Question repository built with %d questions", len(repo), extra={"count": len(repo)})
        return repo

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        allowed_categories: Optional[Sequence[str]] = None,
    ) -> "QuestionRepository":
        return cls(load_questions(path, allowed_categories))

    def load_all(self) -> Tuple[Question, ...]:
        """Return every question, in stable source order."""
        return self._questions

    def by_category(self, category: str) -> Tuple[Question, ...]:
        """Return the questions in ``category``; empty when there are none."""
        return self._by_category.get(category, ())

    def random_sample(
        self,
        n: int,
        rng: RngLike = None,
        category: Optional[str] = None,
    ) -> List[Question]:
        """Draw ``n`` distinct questions without replacement.

        Args:
            n: Number of questions to draw
            rng: Int seed, ``random.Random``, NumPy ``Generator`` or None
            category: Restrict the pool to one category

        Returns:
            List of ``n`` questions in draw order

        Raises:
            ValueError: If ``n`` is negative
            InsufficientDataError: If the pool holds fewer than ``n`` questions
        """
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")

        pool = self._questions if category is None else self.by_category(category)
        if n > len(pool):
            raise InsufficientDataError(n, len(pool), category)

        picked = [pool[i] for i in sample_indices(len(pool), n, rng)]
        logger.debug("Sampled %d of %d questions", n, len(pool), extra={"category": category})
        return picked

    def daily_sample(
        self,
        count: int = DAILY_COUNT,
        day: Optional[date] = None,
        category: Optional[str] = None,
    ) -> List[Question]:
        """Draw the quiz of the day.

        The draw is seeded from the ISO date, so every caller gets the same
        questions in the same order for a given day. ``day`` defaults to today
        in local time. Errors are those of ``random_sample``.
        """
        day = day or date.today()
        seed = make_date_seed(day)
        logger.debug("Daily sample for %s", day.isoformat(), extra={"seed": seed, "category": category})
        return self.random_sample(count, rng=seed, category=category)

    def categories(self) -> Tuple[str, ...]:
        return tuple(self._by_category)

    def category_counts(self) -> Dict[str, int]:
        return {category: len(items) for category, items in self._by_category.items()}

    def get(self, question_id: str) -> Question:
        try:
            return self._by_id[question_id]
        except KeyError:
            raise KeyError(f"Unknown question id: {question_id}") from None

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Question) and self._by_id.get(item.id) == item


@lru_cache(maxsize=1)
def default_repository() -> QuestionRepository:
    """Process-wide repository, built once on first use.

    Uses the file named by the data config when one is set, otherwise the
    embedded question table.
    """
    source = get_data_config().source
    if source:
        logger.info("Loading questions from %s", source, extra={"source": source})
        return QuestionRepository.from_file(source)
    return QuestionRepository.from_records(QUESTION_DATA)


def load_all() -> Tuple[Question, ...]:
    return default_repository().load_all()


def by_category(category: str) -> Tuple[Question, ...]:
    return default_repository().by_category(category)


def random_sample(n: int, rng: RngLike = None, category: Optional[str] = None) -> List[Question]:
    return default_repository().random_sample(n, rng=rng, category=category)


def daily_sample(
    count: int = DAILY_COUNT,
    day: Optional[date] = None,
    category: Optional[str] = None,
) -> List[Question]:
    return default_repository().daily_sample(count, day=day, category=category)
