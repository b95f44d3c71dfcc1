"""scripturequiz package.

A fixed, validated set of multiple-choice Bible trivia questions with
read-only accessors for quiz front-ends.
"""

from .config import AppConfig, ConfigError, default_app_config
from .data import (
    CATEGORIES,
    Question,
    QuestionRepository,
    by_category,
    daily_sample,
    default_repository,
    load_all,
    random_sample,
)
from .statistical import analyze_position_bias
from .utils import (
    DataIntegrityError,
    InsufficientDataError,
    configure_logging,
    set_determinism,
)

__all__ = [
    "__version__",
    "AppConfig",
    "ConfigError",
    "default_app_config",
    "CATEGORIES",
    "Question",
    "QuestionRepository",
    "default_repository",
    "load_all",
    "by_category",
    "random_sample",
    "daily_sample",
    "analyze_position_bias",
    "DataIntegrityError",
    "InsufficientDataError",
    "configure_logging",
    "set_determinism",
]

__version__ = "0.1.0"
