from __future__ import annotations

import os
import tempfile
from dataclasses import asdict
from pathlib import Path
import unittest
from unittest import mock

import yaml

from scripturequiz.config import (
    AppConfig,
    ConfigError,
    DataConfig,
    DeterminismConfig,
    LoggingConfig,
    default_app_config,
    get_data_config,
)


class TestConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_round_trip(self) -> None:
        cfg = AppConfig(
            logging=LoggingConfig(level="DEBUG", log_file="logs/quiz.log", structured=True),
            determinism=DeterminismConfig(seed=7, python_hash_seed=1),
            data=DataConfig(source="data/questions.yaml"),
        )

        out = self.tmp / "nested" / "config.json"
        cfg.to_json(out)

        loaded = AppConfig.from_json(out)
        self.assertEqual(asdict(cfg), asdict(loaded))

    def test_from_yaml_partial(self) -> None:
        path = self.tmp / "config.yaml"
        path.write_text(yaml.safe_dump({"determinism": {"seed": 99}}), encoding="utf-8")

        cfg = AppConfig.from_file(path)
        self.assertEqual(cfg.determinism.seed, 99)
        self.assertEqual(cfg.logging.level, "INFO")
        self.assertIsNone(cfg.data.source)

    def test_from_yaml_empty_file(self) -> None:
        path = self.tmp / "empty.yml"
        path.write_text("", encoding="utf-8")
        self.assertEqual(asdict(AppConfig.from_yaml(path)), asdict(default_app_config()))

    def test_unknown_key_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            AppConfig.from_dict({"logging": {"colour": True}})

    def test_non_mapping_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            AppConfig.from_dict(["determinism", 7])
        with self.assertRaises(ConfigError):
            AppConfig.from_dict({"determinism": [7]})

        path = self.tmp / "list.yaml"
        path.write_text(yaml.safe_dump(["a", "b"]), encoding="utf-8")
        with self.assertRaises(ConfigError):
            AppConfig.from_file(path)

    def test_seed_coerced_or_rejected(self) -> None:
        cfg = AppConfig.from_dict({"determinism": {"seed": "7"}})
        self.assertEqual(cfg.determinism.seed, 7)
        for bad in ("abc", None, True, 1.5j):
            with self.assertRaises(ConfigError):
                AppConfig.from_dict({"determinism": {"seed": bad}})
        with self.assertRaises(ConfigError):
            AppConfig.from_dict({"determinism": {"python_hash_seed": "x"}})

    def test_default_factory(self) -> None:
        cfg = default_app_config()
        self.assertEqual(cfg.logging.level, "INFO")
        self.assertIsNone(cfg.logging.log_file)
        self.assertFalse(cfg.logging.structured)
        self.assertEqual(cfg.determinism.seed, 42)
        self.assertEqual(cfg.determinism.python_hash_seed, 0)
        self.assertIsNone(cfg.data.source)

    def test_defaults_are_not_shared(self) -> None:
        a = default_app_config()
        b = default_app_config()
        a.determinism.seed = 1
        self.assertEqual(b.determinism.seed, 42)

    def test_from_env(self) -> None:
        env = {
            "SCRIPTUREQUIZ_LOG_LEVEL": "WARNING",
            "SCRIPTUREQUIZ_SEED": "123",
            "SCRIPTUREQUIZ_DATA": "questions.json",
        }
        with mock.patch.dict(os.environ, env):
            cfg = AppConfig.from_env()
        self.assertEqual(cfg.logging.level, "WARNING")
        self.assertEqual(cfg.determinism.seed, 123)
        self.assertEqual(cfg.data.source, "questions.json")

    def test_from_env_bad_seed(self) -> None:
        with mock.patch.dict(os.environ, {"SCRIPTUREQUIZ_SEED": "abc"}):
            with self.assertRaises(ConfigError):
                AppConfig.from_env()

    def test_empty_data_env_means_embedded(self) -> None:
        with mock.patch.dict(os.environ, {"SCRIPTUREQUIZ_DATA": ""}):
            self.assertIsNone(get_data_config().source)


if __name__ == "__main__":
    unittest.main()
