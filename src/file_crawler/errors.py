"""Error types for file-crawler.

Every failure that aborts a run derives from ``CrawlerError``.  The
console layer reports these through the configured reporter, except
``LogSinkFailure`` which has nowhere left to be reported and is allowed
to propagate.
"""

from __future__ import annotations

from typing import Optional


MAX_EXTENSIONS = 25


class CrawlerError(Exception):
    """Base class for run-aborting errors."""


class UsageError(CrawlerError):
    def __init__(self) -> None:
        super().__init__(
            'There is no term or regexp defined! Example: '
            'file_crawler term="find me" or file_crawler regexp=^startswith'
        )


class PatternError(CrawlerError):
    """The search expression did not compile.

    ``regexp`` is non-empty when the failure came from the regexp override,
    otherwise the term and case flag produced it.
    """

    def __init__(self, regexp: str, case: str, term: str, error: Exception):
        self.regexp = regexp
        self.case = case
        self.term = term
        self.error = error
        if regexp:
            message = f'Problem regexp {regexp} into regex {error}'
        else:
            message = f'Problem parsing term "{term}" and case "{case}" into regex {error}'
        super().__init__(message)


class TooManyExtensions(CrawlerError):
    def __init__(self) -> None:
        super().__init__(f'Surpassed {MAX_EXTENSIONS} extensions')


class InvalidExtension(CrawlerError):
    def __init__(self, pattern: str, error: Optional[Exception] = None):
        self.pattern = pattern
        self.error = error
        super().__init__(f'Failed to accept extension {pattern}')


class ConfigError(CrawlerError):
    """The YAML configuration file could not be used."""


class LogSinkFailure(Exception):
    """The log file could not be opened or written.

    Not a ``CrawlerError``, so the CLI lets it propagate.
    """

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f'Cannot write to log file {path}: {error}')
