"""
Aggregation of per-fragment word counts.

Runs in the coordinating process once every counting worker has returned.
"""

from collections import defaultdict
from typing import Iterable

from .tokenizer import ChunkCount


def aggregate_counts(chunk_counts: Iterable[ChunkCount]) -> ChunkCount:
    """
    Merge per-fragment counts into the global word frequencies.

    Chunks are folded in the order given, so with fragments in text order the
    keys of the result follow first-seen order in the whole text.

    Args:
        chunk_counts: One ChunkCount per fragment

    Returns:
        ChunkCount with counts summed per word and token totals summed
    """
    word_counts = defaultdict(int)
    total_tokens = 0
    for chunk_count in chunk_counts:
        for word, count in chunk_count.frequencies.items():
            word_counts[word] += count
        total_tokens += chunk_count.total_tokens
    return ChunkCount(frequencies=dict(word_counts), total_tokens=total_tokens)
