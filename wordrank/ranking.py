"""
Rank-sort of distinct words by descending frequency.

Each ranking worker sorts its own partition with rank_partition; the
coordinator then folds the sorted partitions together with merge_partitions.
"""

import logging
from typing import Mapping

logger = logging.getLogger(__name__)


def rank_partition(partition: list[str], frequencies: Mapping[str, int]) -> list[str]:
    """
    Sort a partition in place, most frequent word first.

    Selection sort: for each position the unsorted suffix is scanned for the
    highest frequency and that word is swapped to the front of the suffix.
    Only a strictly higher frequency replaces the current maximum, so among
    equal frequencies the word found first wins.

    Args:
        partition: Words assigned to this worker, sorted in place
        frequencies: Occurrence count of every word in the partition

    Returns:
        The same list object, now in descending frequency order
    """
    size = len(partition)
    for i in range(size - 1):
        maximum_index = i
        for j in range(i + 1, size):
            if frequencies[partition[j]] > frequencies[partition[maximum_index]]:
                maximum_index = j
        partition[i], partition[maximum_index] = partition[maximum_index], partition[i]
    return partition


def merge_ranked(
    left: list[str], right: list[str], frequencies: Mapping[str, int]
) -> list[str]:
    """Merge two descending lists; the left list wins ties."""
    merged = []
    i, j = 0, 0
    while i < len(left) and j < len(right):
        if frequencies[left[i]] >= frequencies[right[j]]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_partitions(
    partitions: list[list[str]], frequencies: Mapping[str, int]
) -> list[str]:
    """
    Fold sorted partitions into one ranked list.

    The accumulator starts as the last partition; partitions 0..N-2 are then
    merged into it one after another, each as the left operand of
    merge_ranked. This is N-1 sequential two-way merges, not a merge tree.

    Args:
        partitions: Partitions already sorted by rank_partition
        frequencies: Global word frequencies

    Returns:
        All words of all partitions in descending frequency order
    """
    if not partitions:
        return []

    ranked = list(partitions[-1])
    for idx, partition in enumerate(partitions[:-1]):
        ranked = merge_ranked(partition, ranked, frequencies)
        logger.debug(f"Merged partition {idx}, {len(ranked)} words ranked so far")
    return ranked
