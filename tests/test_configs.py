"""
Unit tests for run configuration validation.
"""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

import pytest

from wordrank.configs import RunConfig, check_num_workers
from wordrank.errors import InvalidConfigurationError, WordRankError


def test_defaults_are_valid():
    """The default configuration passes validation."""
    config = RunConfig()
    assert config.validate() is config
    assert config.num_workers == 1
    assert config.top_k == 5
    assert config.backend == "process"


def test_zero_top_k_is_valid():
    """Asking for no ranked words is allowed."""
    RunConfig(top_k=0).validate()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_workers": 0},
        {"num_workers": -2},
        {"num_workers": 2.0},
        {"num_workers": "4"},
        {"num_workers": True},
        {"top_k": -1},
        {"top_k": 1.5},
        {"backend": "gpu"},
    ],
)
def test_invalid_values_rejected(kwargs):
    """Malformed values raise instead of being coerced."""
    with pytest.raises(InvalidConfigurationError):
        RunConfig(**kwargs).validate()


def test_check_num_workers():
    """The worker count check returns valid counts and rejects the rest."""
    assert check_num_workers(3) == 3
    with pytest.raises(InvalidConfigurationError):
        check_num_workers(0)


def test_error_hierarchy():
    """Configuration errors are pipeline errors."""
    with pytest.raises(WordRankError):
        RunConfig(num_workers=0).validate()
