"""Result reporters for file-crawler.

Matched paths (and run-aborting diagnostics) are written through a
reporter.  ``ConsoleReporter`` writes each message unchanged to the
console's stream with no newline; ``FileReporter`` appends the message plus
a newline to a log file, opening and closing the file on every call so
nothing is lost if the run is interrupted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from ..errors import LogSinkFailure

CONSOLE_LOG = 'console'


class ConsoleReporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def emit(self, message: str) -> None:
        out = self.console.file
        out.write(message)
        out.flush()

    __call__ = emit


class FileReporter:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def emit(self, message: str) -> None:
        try:
            with self.path.open('a', encoding='utf-8') as f:
                f.write(message)
                f.write('\n')
        except OSError as exc:
            raise LogSinkFailure(str(self.path), exc) from exc

    __call__ = emit


Reporter = Union[ConsoleReporter, FileReporter]


def make_reporter(log: str, console: Optional[Console] = None) -> Reporter:
    """Return the reporter for a ``log`` option value."""
    if log == CONSOLE_LOG:
        return ConsoleReporter(console)
    return FileReporter(log)
