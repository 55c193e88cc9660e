"""
Tokenizer and per-fragment word counter.

Implements the "map" side of the pipeline: a fragment of text is broken into
lowercase alphanumeric words and counted locally, without touching any shared
state, so one call can run in each worker.
"""

import re
import string
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Generator

_WORD_CHARACTERS = frozenset(string.ascii_letters + string.digits)
_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass
class ChunkCount:
    """Word frequencies of a piece of text and the number of tokens counted."""
    frequencies: dict[str, int] = field(default_factory=dict)
    total_tokens: int = 0


def is_divider(character: str) -> bool:
    """Return True for any character outside [A-Za-z0-9]."""
    return character not in _WORD_CHARACTERS


def iter_words(fragment: str) -> Generator[str, None, None]:
    """
    Lazily extract lowercase words from a text fragment.

    A word is a maximal run of non-divider characters. Runs of dividers
    collapse to a single boundary, so no empty token is ever produced. A
    fragment cut in the middle of a word still yields the partial run;
    keeping words whole is the partitioner's job.

    Args:
        fragment: Text to tokenize

    Yields:
        Each word of the fragment, lowercased, in text order

    Example:
        >>> list(iter_words("The cat, the HAT!"))
        ['the', 'cat', 'the', 'hat']
    """
    for match in _WORD_PATTERN.finditer(fragment):
        yield match.group(0).lower()


def count_chunk(fragment: str) -> ChunkCount:
    """
    Count the words of one fragment.

    Pure function of its input, safe to run concurrently on disjoint
    fragments. Keys are inserted in first-occurrence order.

    Args:
        fragment: Text slice assigned to one worker

    Returns:
        ChunkCount holding the word frequencies and the total token count
    """
    word_counts = defaultdict(int)
    total_tokens = 0
    for word in iter_words(fragment):
        word_counts[word] += 1
        total_tokens += 1
    return ChunkCount(frequencies=dict(word_counts), total_tokens=total_tokens)
