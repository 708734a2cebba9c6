"""Command-line interface for file-crawler.

Options are given as ``key=value`` tokens, e.g.::

    file-crawler term="find me" root=./docs ext=txt,md log=matches.log

The literal token ``help`` prints the usage text and exits.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler

from ..config_loader import build_configuration
from ..errors import CrawlerError
from ..logging.logger import make_reporter
from ..supervisor.manager import run_search


console = Console()

HELP_TEXT = """
    You must set either term or regexp
    The simple alphanumeric term you're searching for. Example: term="find me". Default is ""
    The starting folder for searching. Example root="c:/Looky Here". Default is ./
    Up to 25 file extension(s) to search. Example ext=txt,doc. Default is txt
    y for case sensitive. Default is n
    Will search by regexp instead of term and case. Example regexp=(?i)^startswith. Default is ""
    Where to log names of files containing the search. Example: log=C:/Logs/Log.txt Default is console
    """


def configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[handler],
        force=True,
    )


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None, help='YAML file with default option values.')
@click.option('--verbose', is_flag=True, help='Log diagnostics to stderr.')
@click.option('--show-config', is_flag=True, help='Print the resolved configuration and exit.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
def cli(config_path: Optional[str], verbose: bool, show_config: bool, tokens: Tuple[str, ...]) -> None:
    """Search file contents under a directory tree.

    TOKENS are key=value pairs: term, root, ext, case, regexp, log.
    """
    if 'help' in tokens:
        click.echo(HELP_TEXT, nl=False)
        return

    configure_logging(verbose)
    console_reporter = make_reporter('console', console)
    try:
        cfg = build_configuration(tokens, Path(config_path) if config_path else None)
    except CrawlerError as exc:
        console_reporter.emit(str(exc))
        return

    if show_config:
        console.print_json(json.dumps(cfg.to_dict(), indent=2))
        return

    reporter = make_reporter(cfg.log, console)
    try:
        run_search(cfg, reporter.emit)
    except CrawlerError as exc:
        reporter.emit(str(exc))


def main() -> None:  # pragma: no cover
    cli(prog_name='file-crawler')


if __name__ == '__main__':  # pragma: no cover
    main()
