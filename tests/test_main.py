"""Tests for the command-line interface"""
import sys

import pytest
from dotenv import load_dotenv

from spanish_numbers import main as cli
from spanish_numbers.main import main


@pytest.fixture(autouse=True)
def clear_scale_env(monkeypatch):
    """Run every test with no scale, separator or log level overrides from the environment."""
    monkeypatch.delenv('SPANISH_NUMBERS_SCALE', raising=False)
    monkeypatch.delenv('SPANISH_NUMBERS_SEPARATOR', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    yield


@pytest.fixture
def logging_config(monkeypatch):
    """Record the keyword arguments passed to logging.basicConfig."""
    calls = []
    monkeypatch.setattr(cli.logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
    return calls


class TestSingleNumber:
    """Converting one NUMBER argument"""

    def test_long_scale_by_default(self, capsys):
        assert main(['1000000000']) == 0
        assert capsys.readouterr().out == 'mil millones\n'

    def test_short_flag(self, capsys):
        assert main(['1000000000', '--short']) == 0
        assert capsys.readouterr().out == 'un billón\n'

    def test_newline_flag(self, capsys):
        assert main(['-n', '1200300400100']) == 0
        assert capsys.readouterr().out == (
            'un billón\ndoscientos mil trescientos millones\ncuatrocientos mil cien\n'
        )

    def test_zero(self, capsys):
        assert main(['0', '-s', '-n']) == 0
        assert capsys.readouterr().out == 'cero\n'

    def test_environment_default_scale(self, monkeypatch, capsys):
        monkeypatch.setenv('SPANISH_NUMBERS_SCALE', 'short')
        assert main(['1000000000']) == 0
        assert capsys.readouterr().out == 'un billón\n'

    def test_long_flag_overrides_environment(self, monkeypatch, capsys):
        monkeypatch.setenv('SPANISH_NUMBERS_SCALE', 'short')
        assert main(['--long', '1000000000']) == 0
        assert capsys.readouterr().out == 'mil millones\n'

    def test_environment_separator(self, monkeypatch, capsys):
        monkeypatch.setenv('SPANISH_NUMBERS_SEPARATOR', ', ')
        assert main(['1000001']) == 0
        assert capsys.readouterr().out == 'un millón, uno\n'


class TestUsageErrors:
    """Bad arguments print usage and exit without converting"""

    def test_missing_number(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'usage:' in captured.err

    @pytest.mark.parametrize('numeral', ['abc', '1.5', '--1'])
    def test_invalid_number(self, numeral, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['--', numeral])
        assert exc_info.value.code == 2
        assert capsys.readouterr().out == ''

    def test_short_and_long_are_exclusive(self):
        with pytest.raises(SystemExit):
            main(['5', '-s', '-l'])

    def test_unknown_option(self):
        with pytest.raises(SystemExit):
            main(['5', '--bogus'])

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        assert '--short' in capsys.readouterr().out


class TestFileMode:
    """Converting numerals from --file"""

    def test_converts_each_line(self, tmp_path, capsys):
        path = tmp_path / "numbers.txt"
        path.write_text("1\n# skip\n100\n", encoding='utf-8')

        assert main(['--file', str(path)]) == 0
        assert capsys.readouterr().out == '1: uno\n100: cien\n'

    def test_failed_lines_set_exit_status(self, tmp_path, capsys):
        path = tmp_path / "numbers.txt"
        path.write_text("7\nseven\n", encoding='utf-8')

        assert main(['--file', str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == '7: siete\n'
        assert 'seven' in captured.err

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(['--file', str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 2

    def test_number_and_file_are_exclusive(self, tmp_path):
        path = tmp_path / "numbers.txt"
        path.write_text("1\n", encoding='utf-8')
        with pytest.raises(SystemExit):
            main(['5', '--file', str(path)])


class TestLogLevel:
    """LOG_LEVEL is resolved when the CLI runs"""

    def test_level_from_dotenv_file(self, tmp_path, monkeypatch, logging_config, capsys):
        env_path = tmp_path / ".env"
        env_path.write_text("LOG_LEVEL=DEBUG\n", encoding='utf-8')
        monkeypatch.setenv('LOG_LEVEL', 'WARNING')
        load_dotenv(env_path, override=True)

        assert main(['5']) == 0
        assert logging_config[-1]['level'] == 'DEBUG'
        assert capsys.readouterr().out == 'cinco\n'

    def test_invalid_level_falls_back(self, monkeypatch, logging_config, capsys):
        monkeypatch.setenv('LOG_LEVEL', 'verbose')

        assert main(['5']) == 0
        assert logging_config[-1]['level'] == 'WARNING'
        assert capsys.readouterr().out == 'cinco\n'

    def test_verbose_flag_wins(self, monkeypatch, logging_config):
        monkeypatch.setenv('LOG_LEVEL', 'ERROR')

        assert main(['-v', '5']) == 0
        assert logging_config[-1]['level'] == cli.logging.DEBUG


@pytest.mark.skipif(
    not hasattr(sys, 'set_int_max_str_digits'),
    reason="interpreter has no int digit limit"
)
def test_oversized_number_is_usage_error(capsys):
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        with pytest.raises(SystemExit) as exc_info:
            main(['9' * 5000])
    finally:
        sys.set_int_max_str_digits(previous)
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'too long' in captured.err
