"""
Unit tests for result and timing formatting.
"""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from wordrank.report import format_duration, format_ranking, pluralize, top_entries

RANKED = ["the", "cat", "sat", "on", "mat", "ran"]
FREQUENCIES = {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


def test_pluralize():
    """Only counts above one get the plural suffix."""
    assert pluralize(0) == ""
    assert pluralize(1) == ""
    assert pluralize(2) == "s"


def test_format_ranking_sample():
    """The top two words of the sample sentence are rendered as expected."""
    assert format_ranking(RANKED, FREQUENCIES, 2) == [
        "1. the with 3 occurrences",
        "2. cat with 2 occurrences",
    ]


def test_singular_occurrence():
    """A single occurrence uses the singular noun."""
    assert format_ranking(RANKED, FREQUENCIES, 3)[-1] == "3. sat with 1 occurrence"


def test_top_k_sizing():
    """min(K, D) entries are reported; K=0 reports none."""
    assert top_entries(RANKED, FREQUENCIES, 0) == []
    assert len(top_entries(RANKED, FREQUENCIES, 4)) == 4
    assert len(top_entries(RANKED, FREQUENCIES, 100)) == len(RANKED)
    assert top_entries(RANKED, FREQUENCIES, 1) == [(1, "the", 3)]


def test_format_duration():
    """Durations show milliseconds plus minutes/seconds when non-zero."""
    assert format_duration(0.0123) == "12ms"
    assert format_duration(5.5) == "5500ms (5s)"
    assert format_duration(75.5) == "75500ms (1m 15s)"
    assert format_duration(120.0) == "120000ms (2m 0s)"
