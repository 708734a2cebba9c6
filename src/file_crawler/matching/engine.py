"""File matching for file-crawler.

A file matches when its name passes the extension filters and its whole
decoded content contains the content pattern.  Files that cannot be
opened or decoded simply do not match.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Pattern, Sequence

from ..discovery.engine import FileEntry
from ..extensions.builder import is_eligible

logger = logging.getLogger(__name__)


def file_has_match(path: str, pattern: Pattern[str]) -> bool:
    """Return ``True`` if the UTF-8 content of ``path`` contains ``pattern``."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug('Skipping unreadable file %s: %s', path, exc)
        return False
    return pattern.search(contents) is not None


def entry_matches(entry: FileEntry, filters: Sequence[Pattern[str]], pattern: Pattern[str]) -> bool:
    if not entry.is_file():
        return False
    if not is_eligible(entry.name, filters):
        return False
    return file_has_match(entry.path, pattern)


def matching_paths(
    entries: Iterable[FileEntry],
    filters: Sequence[Pattern[str]],
    pattern: Pattern[str],
) -> Iterator[str]:
    """Yield the paths of the entries that match, in traversal order."""
    for entry in entries:
        if entry_matches(entry, filters, pattern):
            yield entry.path


def search(
    entries: Iterable[FileEntry],
    filters: Sequence[Pattern[str]],
    pattern: Pattern[str],
    emit: Callable[[str], None],
) -> int:
    """Emit each matching path and return how many were found."""
    count = 0
    for path in matching_paths(entries, filters, pattern):
        emit(path)
        count += 1
    return count
