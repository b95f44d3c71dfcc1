from __future__ import annotations

import json
import logging
import random
from datetime import date

import numpy as np

from scripturequiz import random_sample
from scripturequiz.security import make_date_seed, make_question_id
from scripturequiz.utils.determinism import set_determinism
from scripturequiz.utils.io import sample_indices
from scripturequiz.utils.logging_config import StructuredFormatter, configure_logging


def test_set_determinism_pins_unseeded_sampling():
    set_determinism(7)
    a = random_sample(5)
    set_determinism(7)
    b = random_sample(5)
    assert a == b


def test_set_determinism_seeds_numpy():
    set_determinism(3)
    a = np.random.rand(3)
    set_determinism(3)
    b = np.random.rand(3)
    assert np.array_equal(a, b)


def test_sample_indices_distinct_and_in_range():
    idx = sample_indices(10, 10, rng=5)
    assert sorted(idx) == list(range(10))
    idx = sample_indices(10, 4, rng=np.random.default_rng(5))
    assert len(set(idx)) == 4
    assert all(isinstance(i, int) and 0 <= i < 10 for i in idx)


def test_sample_indices_int_seed_matches_random_instance():
    assert sample_indices(20, 6, rng=9) == sample_indices(20, 6, rng=random.Random(9))


def test_question_id_stable_and_order_sensitive():
    a = make_question_id("People", "Who built the ark?", ["Moses", "Noah", "Abraham", "David"])
    b = make_question_id("people", "  who built the ark? ", ["moses", "NOAH", "Abraham", "David "])
    c = make_question_id("People", "Who built the ark?", ["Noah", "Moses", "Abraham", "David"])
    assert a == b
    assert a != c
    assert len(a) == 32


def test_date_seed_is_stable_per_day():
    seed = make_date_seed(date(2024, 3, 17))
    assert seed == make_date_seed(date.fromisoformat("2024-03-17"))
    assert seed != make_date_seed(date(2024, 3, 18))
    assert 0 <= seed < 2**64


def test_structured_formatter_emits_json():
    record = logging.LogRecord(
        name="scripturequiz.test", level=logging.INFO, pathname=__file__, lineno=1,
        msg="Loaded %d questions", args=(53,), exc_info=None,
    )
    record.source = "embedded"
    payload = json.loads(StructuredFormatter().format(record))
    assert payload["message"] == "Loaded 53 questions"
    assert payload["level"] == "INFO"
    assert payload["source"] == "embedded"


def test_configure_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "quiz.log"
    configure_logging(level="DEBUG", log_file=str(log_file), structured=True)
    logging.getLogger("scripturequiz.test").info("hello", extra={"count": 3})
    for handler in logging.getLogger().handlers:
        handler.flush()
    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["count"] == 3
