"""CLI utilities for scripturequiz.

``main`` browses, samples and audits the question set; ``validate_dataset``
checks an external question file before it is used as a source.
"""

from .main import main

__all__ = ["main"]
