"""
Error types raised by the word ranking pipeline.

Every error is fatal for the current run: nothing is retried and no partial
ranking is produced. Callers catch WordRankError to report the failure.
"""


class WordRankError(Exception):
    """Base class for all pipeline failures."""


class EmptyInputError(WordRankError):
    """Raised when the text to process has zero length."""

    def __init__(self, message: str = "No text provided"):
        super().__init__(message)


class InvalidConfigurationError(WordRankError):
    """Raised for a non-positive worker count, negative top-K or unknown backend."""


class TooManyWorkersError(WordRankError):
    """Raised when the text has fewer word boundaries than requested workers."""

    def __init__(self, num_workers: int, text_length: int):
        self.num_workers = num_workers
        self.text_length = text_length
        super().__init__(
            f"Cannot split text of length {text_length} into {num_workers} "
            f"fragments: you are probably using more workers than there are words"
        )
