"""
Fork-join word ranking pipeline.

Runs two parallel phases over a fixed number of workers:

1. Counting: the text is split into fragments on word boundaries, each worker
   counts one fragment, and the coordinator aggregates the counts.
2. Ranking: the distinct words are split into contiguous partitions, each
   worker sorts one partition by frequency, and the coordinator folds the
   sorted partitions into the final ranked list.

Pool.map is both the fork and the join: it hands out exactly one task per
worker and blocks until all results are back. Workers share no state, so no
locking is needed; aggregation and merging only start after the barrier.
"""

import logging
import time
from dataclasses import dataclass, field
from multiprocessing import Pool
from multiprocessing.pool import ThreadPool

from .aggregation import aggregate_counts
from .configs import RunConfig
from .errors import EmptyInputError
from .partitioning import partition_text, partition_words
from .ranking import merge_partitions, rank_partition
from .tokenizer import ChunkCount, count_chunk

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of one run: global counts, ranked words and phase timings."""
    frequencies: dict[str, int] = field(default_factory=dict)
    total_tokens: int = 0
    ranked: list[str] = field(default_factory=list)
    counting_seconds: float = 0.0
    ranking_seconds: float = 0.0

    @property
    def distinct_words(self) -> int:
        return len(self.frequencies)


def _create_pool(num_workers: int, backend: str):
    if backend == "thread":
        return ThreadPool(processes=num_workers)
    return Pool(processes=num_workers)


def count_words(text: str, num_workers: int, backend: str = "process") -> ChunkCount:
    """
    Counting phase: split, count fragments in parallel, aggregate.

    Partitioning happens before any worker is started, so a
    TooManyWorkersError aborts the run without doing any counting.

    Args:
        text: Full input text
        num_workers: Number of fragments and workers
        backend: "process" or "thread"

    Returns:
        Global word frequencies and total token count
    """
    fragments = partition_text(text, num_workers)

    with _create_pool(num_workers, backend) as pool:
        chunk_counts = pool.map(count_chunk, fragments)

    for idx, chunk_count in enumerate(chunk_counts):
        logger.debug(
            f"Fragment {idx}: {chunk_count.total_tokens} tokens, "
            f"{chunk_count.frequencies}"
        )
    return aggregate_counts(chunk_counts)


def rank_words(
    frequencies: dict[str, int], num_workers: int, backend: str = "process"
) -> list[str]:
    """
    Ranking phase: partition distinct words, sort in parallel, fold-merge.

    Each worker receives only the frequencies of its own words.

    Args:
        frequencies: Global word frequencies
        num_workers: Number of partitions and workers
        backend: "process" or "thread"

    Returns:
        Every distinct word, most frequent first
    """
    partitions = partition_words(list(frequencies), num_workers)
    tasks = [
        (partition, {word: frequencies[word] for word in partition})
        for partition in partitions
    ]

    with _create_pool(num_workers, backend) as pool:
        sorted_partitions = pool.starmap(rank_partition, tasks)

    logger.debug(f"Sorted partitions: {sorted_partitions}")
    return merge_partitions(sorted_partitions, frequencies)


def run_pipeline(text: str, config: RunConfig) -> PipelineResult:
    """
    Count and rank the words of text.

    Args:
        text: Input text, fully loaded in memory
        config: Run configuration; validated before any work starts

    Returns:
        PipelineResult with the global frequencies and the ranked word list

    Raises:
        InvalidConfigurationError: If the configuration is malformed
        EmptyInputError: If the text is empty
        TooManyWorkersError: If the text has too few word boundaries
    """
    config.validate()
    if not text:
        raise EmptyInputError()

    logger.info(
        f"Processing text of length {len(text)} with {config.num_workers} "
        f"{config.backend} worker(s)"
    )

    start_time = time.time()
    counts = count_words(text, config.num_workers, config.backend)
    counting_seconds = time.time() - start_time
    logger.info(
        f"Counted {counts.total_tokens} words ({len(counts.frequencies)} distinct) "
        f"in {counting_seconds:.4f} seconds"
    )

    start_time = time.time()
    ranked = rank_words(counts.frequencies, config.num_workers, config.backend)
    ranking_seconds = time.time() - start_time
    logger.info(f"Ranked {len(ranked)} words in {ranking_seconds:.4f} seconds")

    return PipelineResult(
        frequencies=counts.frequencies,
        total_tokens=counts.total_tokens,
        ranked=ranked,
        counting_seconds=counting_seconds,
        ranking_seconds=ranking_seconds,
    )
