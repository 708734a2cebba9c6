import io

import pytest
from rich.console import Console


@pytest.fixture
def sample_tree(tmp_path):
    """root/a.txt, root/b.TXT, root/sub/c.md and root/sub/d.txt."""
    (tmp_path / 'a.txt').write_text('hello', encoding='utf-8')
    (tmp_path / 'b.TXT').write_text('HELLO', encoding='utf-8')
    sub = tmp_path / 'sub'
    sub.mkdir()
    (sub / 'c.md').write_text('hello', encoding='utf-8')
    (sub / 'd.txt').write_text('goodbye', encoding='utf-8')
    return tmp_path


@pytest.fixture
def string_console():
    return Console(file=io.StringIO(), soft_wrap=True, highlight=False)
