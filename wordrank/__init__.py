"""
wordrank package.

Counts word frequencies with a fixed pool of parallel workers and ranks the
distinct words by frequency using a partition -> local sort -> merge scheme.
"""

from .configs import RunConfig
from .errors import (
    EmptyInputError,
    InvalidConfigurationError,
    TooManyWorkersError,
    WordRankError,
)
from .pipeline import PipelineResult, run_pipeline

__all__ = [
    "EmptyInputError",
    "InvalidConfigurationError",
    "PipelineResult",
    "RunConfig",
    "TooManyWorkersError",
    "WordRankError",
    "run_pipeline",
]
