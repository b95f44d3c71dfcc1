from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class ConfigError(ValueError):
    """Raised when a config file or environment setting is malformed."""
    pass


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: Optional[str] = None
    structured: bool = False


@dataclass
class DeterminismConfig:
    seed: int = 42
    python_hash_seed: int = 0


@dataclass
class DataConfig:
    source: Optional[str] = None  # JSON/JSONL/YAML question file; None means the embedded set


@dataclass
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    determinism: DeterminismConfig = field(default_factory=DeterminismConfig)
    data: DataConfig = field(default_factory=DataConfig)

    @staticmethod
    def from_dict(payload: Any) -> "AppConfig":
        if not isinstance(payload, dict):
            raise ConfigError(f"Config must be a mapping, got {type(payload).__name__}")

        sections: Dict[str, Any] = {}
        for name, section_cls in (
            ("logging", LoggingConfig),
            ("determinism", DeterminismConfig),
            ("data", DataConfig),
        ):
            section = payload.get(name) or {}
            if not isinstance(section, dict):
                raise ConfigError(f"Config section '{name}' must be a mapping")
            try:
                sections[name] = section_cls(**section)
            except TypeError as e:
                raise ConfigError(f"Invalid config section '{name}': {e}") from None

        cfg = AppConfig(**sections)
        cfg.determinism.seed = _as_int("determinism.seed", cfg.determinism.seed)
        cfg.determinism.python_hash_seed = _as_int(
            "determinism.python_hash_seed", cfg.determinism.python_hash_seed
        )
        return cfg

    @staticmethod
    def from_json(path: str | Path) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            return AppConfig.from_dict(json.load(f))

    @staticmethod
    def from_yaml(path: str | Path) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            return AppConfig.from_dict(yaml.safe_load(f) or {})

    @staticmethod
    def from_file(path: str | Path) -> "AppConfig":
        if Path(path).suffix in {".yaml", ".yml"}:
            return AppConfig.from_yaml(path)
        return AppConfig.from_json(path)

    @staticmethod
    def from_env() -> "AppConfig":
        cfg = default_app_config()
        cfg.logging.level = os.getenv("SCRIPTUREQUIZ_LOG_LEVEL", cfg.logging.level)
        cfg.determinism.seed = _as_int(
            "SCRIPTUREQUIZ_SEED", os.getenv("SCRIPTUREQUIZ_SEED", cfg.determinism.seed)
        )
        cfg.data = get_data_config()
        return cfg

    def to_dict(self) -> Dict[str, Any]:
        return {
            "logging": asdict(self.logging),
            "determinism": asdict(self.determinism),
            "data": asdict(self.data),
        }

    def to_json(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)


def get_data_config() -> DataConfig:
    return DataConfig(source=os.getenv("SCRIPTUREQUIZ_DATA") or None)


def default_app_config() -> AppConfig:
    return AppConfig()
