"""
Run configuration for the word ranking pipeline.
"""

from dataclasses import dataclass

from .errors import InvalidConfigurationError

BACKENDS = ("process", "thread")


@dataclass
class RunConfig:
    """
    Configuration for a single word ranking run.

    Attributes:
        num_workers (int): Number of parallel workers for counting and ranking
        top_k (int): Number of ranked words to report
        backend (str): Worker pool backend ("process" or "thread")
        verbose (bool): Log intermediate results at DEBUG level
        show_times (bool): Report the duration of each phase

    Example:
        config = RunConfig(num_workers=4, top_k=10)
        config.validate()
    """
    num_workers: int = 1        # Workers per fork-join phase
    top_k: int = 5              # Ranking count
    backend: str = "process"    # Pool implementation
    verbose: bool = False       # Diagnostic logging
    show_times: bool = False    # Phase timings

    def validate(self) -> "RunConfig":
        """Reject malformed values instead of coercing them."""
        check_num_workers(self.num_workers)
        if not _is_int(self.top_k) or self.top_k < 0:
            raise InvalidConfigurationError(
                f"Ranking count must be a non-negative integer, got {self.top_k!r}"
            )
        if self.backend not in BACKENDS:
            raise InvalidConfigurationError(
                f"Unsupported backend {self.backend!r}, expected one of {BACKENDS}"
            )
        return self


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_num_workers(num_workers) -> int:
    """Raise InvalidConfigurationError unless num_workers is an int >= 1."""
    if not _is_int(num_workers) or num_workers < 1:
        raise InvalidConfigurationError(
            f"Worker count must be a positive integer, got {num_workers!r}"
        )
    return num_workers
