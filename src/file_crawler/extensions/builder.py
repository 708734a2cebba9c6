"""Extension filters for file-crawler.

Each comma-separated token becomes a case-insensitive regular expression
anchored to the end of a file name.  Tokens are not escaped, so a
malformed token fails the whole build.
"""

from __future__ import annotations

import logging
import re
from typing import Pattern, Sequence, Tuple

from ..errors import MAX_EXTENSIONS, InvalidExtension, TooManyExtensions

logger = logging.getLogger(__name__)


def extension_expression(token: str) -> str:
    """Return the suffix expression for a single extension token."""
    if token.startswith('.'):
        return '\\' + token + r'\Z'
    return r'\.' + token + r'\Z'


def build_extension_filters(ext: str) -> Tuple[Pattern[str], ...]:
    """Compile the extension list into suffix matchers.

    Args:
        ext: Comma-separated extensions, e.g. ``txt,md`` or ``.log``.

    Returns:
        One compiled matcher per token, in the order given.

    Raises:
        TooManyExtensions: if more than ``MAX_EXTENSIONS`` tokens are given.
        InvalidExtension: if any token does not form a valid expression.
    """
    tokens = ext.split(',', MAX_EXTENSIONS)
    if len(tokens) > MAX_EXTENSIONS:
        raise TooManyExtensions()

    filters = []
    for token in tokens:
        expression = extension_expression(token)
        try:
            filters.append(re.compile(expression, re.IGNORECASE))
        except re.error as exc:
            raise InvalidExtension(expression, exc) from exc
    logger.debug('Extension filters: %s', [f.pattern for f in filters])
    return tuple(filters)


def is_eligible(file_name: str, filters: Sequence[Pattern[str]]) -> bool:
    """Return ``True`` if ``file_name`` ends with any of the filtered extensions."""
    return any(f.search(file_name) for f in filters)
