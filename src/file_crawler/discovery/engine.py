"""Discovery engine for file-crawler.

Walks a directory tree and yields every node it can reach, classified as
a regular file, a directory or something else.  Symbolic links are not
followed.  Nodes that cannot be listed or inspected are skipped so one
unreadable directory never stops the walk.  Names are visited in sorted
order, which makes repeated walks of an unchanged tree identical.
Paths keep the form of the given root, so a root of ``./`` yields ``./a.txt``.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class EntryKind(Enum):
    FILE = auto()
    DIRECTORY = auto()
    OTHER = auto()


@dataclass(frozen=True)
class FileEntry:
    path: str
    kind: EntryKind

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE


def classify(path: str) -> Optional[EntryKind]:
    """Classify ``path`` without following symlinks, or ``None`` if it cannot be inspected."""
    try:
        mode = os.lstat(path).st_mode
    except OSError as exc:
        logger.debug('Skipping %s: %s', path, exc)
        return None
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def _log_walk_error(exc: OSError) -> None:
    logger.debug('Cannot list %s: %s', exc.filename, exc)


def walk_entries(root: str) -> Iterator[FileEntry]:
    """Yield a ``FileEntry`` for ``root`` and everything beneath it.

    Args:
        root: Starting path.  A regular file is yielded on its own.

    Yields:
        ``FileEntry`` objects, the root first, then each directory's
        children in name order before descending.
    """
    kind = classify(root)
    if kind is None:
        return
    yield FileEntry(root, kind)
    if kind is not EntryKind.DIRECTORY:
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for name in sorted(dirnames + filenames):
            path = os.path.join(dirpath, name)
            child_kind = classify(path)
            if child_kind is not None:
                yield FileEntry(path, child_kind)


def walk_files(root: str) -> Iterator[FileEntry]:
    """Yield only the regular files found by ``walk_entries``."""
    for entry in walk_entries(root):
        if entry.is_file():
            yield entry
