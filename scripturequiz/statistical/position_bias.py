"""Answer-position balance audit for the question set."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from scipy import stats

from ..data.schemas import Question
from ..utils.validation import NUM_OPTIONS

logger = logging.getLogger(__name__)

# Standardized residual above which a position counts as over-represented
RESIDUAL_CUTOFF = 1.96


@dataclass
class PositionBiasReport:
    """Report structure for position bias analysis."""
    timestamp: str
    total_questions: int
    position_frequencies: Dict[str, int]
    category_frequencies: Dict[str, Dict[str, int]]
    chi_square: float
    p_value: float
    df: int
    significance_level: float
    is_biased: bool
    hot_positions: List[int]
    predictive_questions: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def position_counts(questions: Sequence[Question]) -> np.ndarray:
    """Count how often each position (0-based) holds the correct answer."""
    counts = np.zeros(NUM_OPTIONS, dtype=int)
    for q in questions:
        counts[q.answer_index] += 1
    return counts


def _as_frequencies(counts: np.ndarray) -> Dict[str, int]:
    # 1-based keys, as positions are shown to players
    return {str(i + 1): int(c) for i, c in enumerate(counts)}


def identify_hot_positions(counts: np.ndarray) -> List[int]:
    """Return the 1-based positions whose standardized residual exceeds the cutoff."""
    n = counts.sum()
    if n == 0:
        return []
    expected = np.full(len(counts), n / len(counts))
    residuals = (counts - expected) / np.sqrt(expected)
    return [i + 1 for i, z in enumerate(residuals) if z >= RESIDUAL_CUTOFF]


def analyze_position_bias(
    questions: Sequence[Question],
    significance_level: float = 0.05,
    save_path: Optional[Path] = None,
) -> PositionBiasReport:
    """Chi-square test of correct-answer positions against a uniform spread.

    Args:
        questions: Questions to audit
        significance_level: Threshold on the p-value for ``is_biased``
        save_path: Optional JSON output path

    Returns:
        PositionBiasReport

    Raises:
        ValueError: If ``questions`` is empty or ``significance_level`` is
            not strictly between 0 and 1
    """
    if not questions:
        raise ValueError("Position bias analysis needs at least one question")
    if not 0 < significance_level < 1:
        raise ValueError(f"Significance level must be between 0 and 1, got {significance_level}")

    counts = position_counts(questions)
    result = stats.chisquare(counts)
    chi2 = float(result.statistic)
    p = float(result.pvalue)

    by_category: Dict[str, List[Question]] = {}
    for q in questions:
        by_category.setdefault(q.category, []).append(q)

    hot = identify_hot_positions(counts)
    predictive = [q.id for q in questions if q.answer_index + 1 in hot]

    report = PositionBiasReport(
        timestamp=_now_iso(),
        total_questions=len(questions),
        position_frequencies=_as_frequencies(counts),
        category_frequencies={
            category: _as_frequencies(position_counts(items))
            for category, items in by_category.items()
        },
        chi_square=chi2,
        p_value=p,
        df=NUM_OPTIONS - 1,
        significance_level=significance_level,
        is_biased=bool(p < significance_level),
        hot_positions=hot,
        predictive_questions=predictive,
    )
    logger.info(
        "Position bias: chi2=%.3f p=%.4f biased=%s", chi2, p, report.is_biased
    )

    if save_path:
        report.save(save_path)

    return report
