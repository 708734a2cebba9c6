"""Configuration handling for file-crawler.

Search options arrive as ``key=value`` command-line tokens, optionally
layered over a YAML file.  The result is an immutable
``SearchConfiguration``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class SearchConfiguration:
    term: str = ''
    root: str = './'
    ext: str = 'txt'
    case: str = 'n'
    regexp: str = ''
    log: str = 'console'

    @classmethod
    def keys(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def has_required(self) -> bool:
        return self.term != '' or self.regexp != ''

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def parse_tokens(tokens: Iterable[str]) -> Dict[str, str]:
    """Turn ``key=value`` tokens into a mapping of recognised options.

    Tokens without ``=`` and unknown keys are ignored.  Only the first
    ``=`` splits, and a later token for the same key wins.
    """
    known = SearchConfiguration.keys()
    values: Dict[str, str] = {}
    for token in tokens:
        if '=' not in token:
            continue
        key, value = token.split('=', 1)
        if key in known:
            values[key] = value
    return values


def load_config(path: Path) -> Dict[str, str]:
    """Load option values from a YAML file.

    Lists are joined with commas (handy for ``ext``), ``null`` entries are
    dropped and every other scalar is converted with ``str``.  YAML 1.1 reads
    unquoted ``yes``/``no``/``on``/``off`` as booleans; those become ``y``
    and ``n``, so ``case: yes`` means case-sensitive.  Quote such values to
    keep them literal, e.g. ``term: "on"``.
    """
    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f'Cannot load config file {path}: {exc}') from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f'Config file {path} must contain a mapping')
    known = SearchConfiguration.keys()
    values: Dict[str, str] = {}
    for key, value in data.items():
        if key not in known or value is None:
            continue
        if isinstance(value, bool):
            values[key] = 'y' if value else 'n'
        elif isinstance(value, (list, tuple)):
            values[key] = ','.join(str(v) for v in value)
        else:
            values[key] = str(value)
    return values


def build_configuration(tokens: Iterable[str] = (), config_path: Optional[Path] = None) -> SearchConfiguration:
    """Resolve defaults, then the YAML file, then command-line tokens."""
    cfg = SearchConfiguration()
    if config_path is not None:
        cfg = replace(cfg, **load_config(config_path))
    return replace(cfg, **parse_tokens(tokens))
