"""
Text formatting of ranking results and timings.
"""

import math


def pluralize(count: int) -> str:
    """Return the plural suffix for a count."""
    return "s" if count > 1 else ""


def format_duration(seconds: float) -> str:
    """
    Format a duration as milliseconds, adding minutes/seconds when non-zero.

    Example:
        >>> format_duration(75.5)
        '75500ms (1m 15s)'
    """
    milliseconds = int(seconds * 1000)
    whole_seconds = math.floor(seconds)
    minutes = whole_seconds // 60
    whole_seconds -= minutes * 60
    if minutes > 0:
        return f"{milliseconds}ms ({minutes}m {whole_seconds}s)"
    if whole_seconds > 0:
        return f"{milliseconds}ms ({whole_seconds}s)"
    return f"{milliseconds}ms"


def top_entries(
    ranked: list[str], frequencies: dict[str, int], top_k: int
) -> list[tuple[int, str, int]]:
    """Return (rank, word, count) for the first min(top_k, len(ranked)) words."""
    return [
        (rank, word, frequencies[word])
        for rank, word in enumerate(ranked[:max(top_k, 0)], start=1)
    ]


def format_ranking(
    ranked: list[str], frequencies: dict[str, int], top_k: int
) -> list[str]:
    """
    Render the top-K words, one line each.

    Example:
        >>> format_ranking(["the", "cat"], {"the": 3, "cat": 1}, 5)
        ['1. the with 3 occurrences', '2. cat with 1 occurrence']
    """
    return [
        f"{rank}. {word} with {count} occurrence{pluralize(count)}"
        for rank, word, count in top_entries(ranked, frequencies, top_k)
    ]
