from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scripturequiz.data.repository import QuestionRepository, default_repository  # noqa: E402


# ====================
# Record Fixtures
# ====================

@pytest.fixture
def valid_records() -> List[Dict[str, Any]]:
    """Six well-formed records over three categories."""
    return [
        {"category": "People", "q": "Who built the ark?", "options": ["Moses", "Noah", "Abraham", "David"], "answer": 1, "ref": "Genesis 6:13-14"},
        {"category": "People", "q": "Who killed Goliath?", "options": ["Saul", "Jonathan", "David", "Joshua"], "answer": 2, "ref": "1 Samuel 17:50"},
        {"category": "Places", "q": "In which city was Jesus born?", "options": ["Nazareth", "Jerusalem", "Bethlehem", "Capernaum"], "answer": 2, "ref": "Matthew 2:1"},
        {"category": "Places", "q": "Where did Noah's ark come to rest?", "options": ["Mount Sinai", "Mount Ararat", "Mount Carmel", "Mount Nebo"], "answer": 1},
        {"category": "Scripture", "q": "What is the first book of the Bible?", "options": ["Exodus", "Psalms", "Genesis", "Matthew"], "answer": 2, "ref": ""},
        {"category": "Scripture", "q": "How many Psalms are in the Bible?", "options": ["50", "100", "119", "150"], "answer": 3, "ref": ""},
    ]


@pytest.fixture
def balanced_records() -> List[Dict[str, Any]]:
    """Twenty records whose correct answers are spread evenly over A-D."""
    return [
        {
            "category": "Events",
            "q": f"Balanced question {i}?",
            "options": [f"opt {i}-a", f"opt {i}-b", f"opt {i}-c", f"opt {i}-d"],
            "answer": i % 4,
            "ref": "",
        }
        for i in range(20)
    ]


@pytest.fixture
def repo(valid_records) -> QuestionRepository:
    return QuestionRepository.from_records(valid_records)


@pytest.fixture(autouse=True)
def _fresh_default_repository(monkeypatch):
    """Keep the process-wide repository from leaking a test's data source."""
    monkeypatch.delenv("SCRIPTUREQUIZ_DATA", raising=False)
    default_repository.cache_clear()
    yield
    default_repository.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """CLI runs reconfigure the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


# ====================
# File Fixtures
# ====================

@pytest.fixture
def json_file(tmp_path, valid_records) -> Path:
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(valid_records), encoding="utf-8")
    return path


@pytest.fixture
def jsonl_file(tmp_path, valid_records) -> Path:
    path = tmp_path / "questions.jsonl"
    with open(path, "w", encoding="utf-8") as f:
        for record in valid_records:
            f.write(json.dumps(record) + "\n")
        f.write("\n")
    return path


@pytest.fixture
def yaml_file(tmp_path, valid_records) -> Path:
    path = tmp_path / "questions.yaml"
    path.write_text(yaml.safe_dump(valid_records, allow_unicode=True), encoding="utf-8")
    return path


@pytest.fixture
def bad_file(tmp_path, valid_records) -> Path:
    """JSON file with two malformed records (indices 1 and 3)."""
    records = [dict(r) for r in valid_records]
    records[1]["options"] = ["Saul", "Jonathan", "David"]
    records[3]["answer"] = 4
    path = tmp_path / "bad_questions.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path
