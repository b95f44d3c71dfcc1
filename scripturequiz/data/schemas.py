"""Data schemas for scripturequiz."""

from typing import Any, Dict, NamedTuple, Tuple

from ..security import make_question_id

CATEGORIES: Tuple[str, ...] = (
    "People",
    "Events",
    "Places",
    "Scripture",
    "Teachings",
    "Miracles",
)


class Question(NamedTuple):
    """A single multiple-choice trivia question."""
    category: str
    text: str
    options: Tuple[str, ...]
    answer_index: int
    reference: str = ""

    @property
    def id(self) -> str:
        return make_question_id(self.category, self.text, list(self.options))

    @property
    def correct_option(self) -> str:
        return self.options[self.answer_index]

    def is_correct(self, index: int) -> bool:
        return index == self.answer_index

    def to_record(self) -> Dict[str, Any]:
        """Raw mapping in the on-disk question file layout."""
        return {
            "category": self.category,
            "q": self.text,
            "options": list(self.options),
            "answer": self.answer_index,
            "ref": self.reference,
        }
