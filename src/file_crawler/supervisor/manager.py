"""Run orchestration for file-crawler.

Builds the content pattern and extension filters up front, then walks the
tree and reports matches.  Any configuration problem is raised before a
single file is read.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..config_loader import SearchConfiguration
from ..discovery.engine import walk_files
from ..errors import UsageError
from ..extensions.builder import build_extension_filters
from ..matching.engine import search
from ..pattern.builder import build_content_pattern

logger = logging.getLogger(__name__)


def run_search(cfg: SearchConfiguration, emit: Callable[[str], None]) -> int:
    """Search ``cfg.root`` and emit every matching path.

    Args:
        cfg: Resolved search options.
        emit: Receives each matching path as a single string.

    Returns:
        The number of matching files.

    Raises:
        UsageError: if neither ``term`` nor ``regexp`` is set.
        PatternError: if the search expression does not compile.
        TooManyExtensions: if ``ext`` lists more than 25 extensions.
        InvalidExtension: if an extension does not form a valid expression.
    """
    if not cfg.has_required():
        raise UsageError()
    pattern = build_content_pattern(cfg.regexp, cfg.case, cfg.term)
    filters = build_extension_filters(cfg.ext)

    logger.info('Searching %s for %r', cfg.root, pattern.pattern)
    count = search(walk_files(cfg.root), filters, pattern, emit)
    logger.info('%d matching file(s) under %s', count, cfg.root)
    return count
