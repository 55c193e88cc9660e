"""
Work partitioning for both fork-join phases.

compute_pivots / partition_text split the input text into one fragment per
counting worker without cutting any word in two. partition_words splits the
distinct words into one contiguous slice per ranking worker.
"""

import logging

from .configs import check_num_workers
from .errors import EmptyInputError, TooManyWorkersError
from .tokenizer import is_divider

logger = logging.getLogger(__name__)


def compute_pivots(text: str, num_workers: int) -> list[int]:
    """
    Compute one pivot per worker, each moved forward onto a divider.

    The candidate pivot of worker i is floor((i + 1) * L / N). It is advanced
    while the character under it is a word character, stopping at the end of
    the text. The divider at a pivot belongs to neither neighbouring fragment,
    so the next fragment starts at pivot + 1; a pivot falling before that
    start means there are fewer word boundaries than workers.

    Args:
        text: Full input text
        num_workers: Number of counting workers (N)

    Returns:
        N pivots; the last one only validates the split, since the final
        fragment always runs to the end of the text

    Raises:
        InvalidConfigurationError: If num_workers is not a positive integer
        TooManyWorkersError: If a pivot regresses below the previous
            fragment start
    """
    check_num_workers(num_workers)
    text_length = len(text)
    pivots = []
    next_start = 0
    for idx in range(num_workers):
        pivot = (idx + 1) * text_length // num_workers
        while pivot < text_length and not is_divider(text[pivot]):
            pivot += 1
        if pivot < next_start:
            raise TooManyWorkersError(num_workers, text_length)
        pivots.append(pivot)
        next_start = pivot + 1
    return pivots


def partition_text(text: str, num_workers: int) -> list[str]:
    """
    Split text into num_workers contiguous fragments on word boundaries.

    Raises:
        InvalidConfigurationError: If num_workers is not a positive integer
        EmptyInputError: If the text is empty
        TooManyWorkersError: If the text cannot supply enough boundaries
    """
    check_num_workers(num_workers)
    if not text:
        raise EmptyInputError()

    pivots = compute_pivots(text, num_workers)

    fragments = []
    start = 0
    for idx, pivot in enumerate(pivots):
        if idx == num_workers - 1:
            fragments.append(text[start:])
        else:
            fragments.append(text[start:pivot])
        start = pivot + 1

    logger.debug(
        f"Split text of length {len(text)} into fragments of lengths "
        f"{[len(fragment) for fragment in fragments]}"
    )
    return fragments


def partition_words(words: list[str], num_workers: int) -> list[list[str]]:
    """
    Split the distinct words into num_workers contiguous partitions.

    Every partition holds floor(D / N) words except the last, which also
    takes the remainder. With fewer words than workers all leading
    partitions are empty.
    """
    check_num_workers(num_workers)
    if num_workers == 1:
        return [list(words)]

    part_size = len(words) // num_workers
    partitions = []
    for idx in range(num_workers):
        start = idx * part_size
        if idx == num_workers - 1:
            partitions.append(list(words[start:]))
        else:
            partitions.append(list(words[start:start + part_size]))
    return partitions
