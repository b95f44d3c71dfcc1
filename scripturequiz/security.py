"""Stable identifiers for questions."""

import hashlib
from datetime import date


def make_question_id(category: str, question_text: str, options: list[str]) -> str:
    """Generate a stable question ID using BLAKE2b hashing.

    Args:
        category: Category label
        question_text: The question prompt
        options: Answer options, in display order

    Returns:
        Hexadecimal hash string (32 characters)
    """
    normalized_text = _normalize_text_for_hash(category, question_text, options)
    return hashlib.blake2b(
        normalized_text.encode('utf-8'),
        digest_size=16  # 16 bytes = 32 hex characters
    ).hexdigest()


def _normalize_text_for_hash(category: str, question_text: str, options: list[str]) -> str:
    """Normalize text for consistent hashing."""
    normalized_question = question_text.lower().strip()
    # Option order is kept: the answer index depends on it
    normalized_options = [option.lower().strip() for option in options]
    return f"{category.strip().lower()}|{normalized_question}|{'|'.join(normalized_options)}"


def make_date_seed(day: date) -> int:
    """Derive a sampling seed from a calendar day.

    Every process computes the same seed for the same ISO date, so a daily
    quiz is shared by all players without storing anything.
    """
    digest = hashlib.blake2b(day.isoformat().encode('utf-8'), digest_size=8).digest()
    return int.from_bytes(digest, "big")
