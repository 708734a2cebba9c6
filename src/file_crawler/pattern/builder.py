"""Content pattern construction for file-crawler.

A run searches with exactly one compiled expression.  The ``regexp``
option is authoritative when set; otherwise ``term`` is compiled and made
case-insensitive unless ``case`` is exactly ``y`` or ``Y``.
"""

from __future__ import annotations

import logging
import re
from typing import Pattern

from ..errors import PatternError

logger = logging.getLogger(__name__)

CASE_SENSITIVE_FLAGS = ('y', 'Y')


def build_content_pattern(regexp: str, case: str, term: str) -> Pattern[str]:
    """Compile the expression used against whole-file contents.

    Args:
        regexp: Full regular expression; when non-empty ``case`` and ``term`` are ignored.
        case: ``y``/``Y`` for a case-sensitive term, anything else is case-insensitive.
        term: Expression searched for when no ``regexp`` is given.

    Raises:
        PatternError: if the chosen expression does not compile.
    """
    try:
        if regexp != '':
            pattern = re.compile(regexp)
        elif case in CASE_SENSITIVE_FLAGS:
            pattern = re.compile(term)
        else:
            pattern = re.compile(term, re.IGNORECASE)
    except re.error as exc:
        raise PatternError(regexp, case, term, exc) from exc
    logger.debug('Content pattern %r (flags=%d)', pattern.pattern, pattern.flags)
    return pattern
