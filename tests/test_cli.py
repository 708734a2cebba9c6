import json
import os

from click.testing import CliRunner

from file_crawler.console.main import cli


def invoke(*args):
    return CliRunner().invoke(cli, list(args))


def test_help_token_skips_search(sample_tree):
    result = invoke(f'root={sample_tree}', 'term=hello', 'help')
    assert result.exit_code == 0
    assert 'You must set either term or regexp' in result.output
    assert str(sample_tree) not in result.output


def test_console_output_is_concatenated_paths(sample_tree):
    result = invoke(f'root={sample_tree}', 'term=hello')
    assert result.exit_code == 0
    expected = [os.path.join(str(sample_tree), 'a.txt'), os.path.join(str(sample_tree), 'b.TXT')]
    assert result.output in (''.join(expected), ''.join(reversed(expected)))


def test_file_log(sample_tree, tmp_path):
    log = tmp_path / 'out' / 'matches.log'
    log.parent.mkdir()
    result = invoke(f'root={sample_tree}', 'term=hello', f'log={log}')
    assert result.exit_code == 0
    assert result.output == ''
    lines = log.read_text(encoding='utf-8').splitlines()
    assert sorted(os.path.basename(p) for p in lines) == ['a.txt', 'b.TXT']


def test_usage_error_is_reported_with_success_status(sample_tree):
    result = invoke(f'root={sample_tree}')
    assert result.exit_code == 0
    assert result.output.startswith('There is no term or regexp defined!')


def test_pattern_error_is_reported(sample_tree):
    result = invoke(f'root={sample_tree}', 'regexp=(')
    assert result.exit_code == 0
    assert result.output.startswith('Problem regexp ( into regex')


def test_extension_errors_go_to_log_file(sample_tree, tmp_path):
    log = tmp_path / 'errors.log'
    result = invoke(f'root={sample_tree}', 'term=x', 'ext=' + ','.join(['a'] * 30), f'log={log}')
    assert result.exit_code == 0
    assert log.read_text(encoding='utf-8') == 'Surpassed 25 extensions\n'


def test_unwritable_log_fails_loudly(sample_tree, tmp_path):
    log = tmp_path / 'missing-dir' / 'out.log'
    result = invoke(f'root={sample_tree}', 'term=hello', f'log={log}')
    assert result.exit_code != 0
    assert result.exception is not None


def test_config_file_and_show_config(tmp_path):
    path = tmp_path / 'crawler.yml'
    path.write_text('term: abc\next: [md, rst]\n', encoding='utf-8')
    result = invoke('--config', str(path), '--show-config', 'case=y')
    assert result.exit_code == 0
    assert '"md,rst"' in result.output
    assert '"abc"' in result.output
    assert '"case"' in result.output


def test_config_error_is_reported(tmp_path):
    path = tmp_path / 'bad.yml'
    path.write_text('just a string\n', encoding='utf-8')
    result = invoke('--config', str(path), 'term=x')
    assert result.exit_code == 0
    assert 'must contain a mapping' in result.output


def test_missing_config_file_is_reported(tmp_path):
    result = invoke('--config', str(tmp_path / 'nope.yml'), 'term=x')
    assert result.exit_code == 0
    assert result.output.startswith('Cannot load config file')


def test_help_wins_over_missing_config(tmp_path):
    result = invoke('--config', str(tmp_path / 'nope.yml'), 'help')
    assert result.exit_code == 0
    assert 'You must set either term or regexp' in result.output
