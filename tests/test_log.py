"""Tests for tiffentries/log.py -- CLI color, entry formatting, timestamps."""

import re

import pytest

from tiffentries import log
from tiffentries.constants import DataType
from tiffentries.entries import Rational, TagEntry
from tiffentries.tiff.tags import ExifPart


@pytest.fixture(autouse=True)
def _reset_log_state():
    """Restore log module state after each test."""
    log.set_color_enabled(False)
    yield
    log.set_color_enabled(False)


class TestCLIColor:
    @pytest.mark.parametrize('fn', [log.cli_header, log.cli_success, log.cli_warning,
                                    log.cli_error, log.cli_dim, log.cli_bold])
    def test_enabled(self, fn):
        log.set_color_enabled(True)
        result = fn('text')
        assert '\033[' in result
        assert 'text' in result

    @pytest.mark.parametrize('fn', [log.cli_header, log.cli_success, log.cli_warning,
                                    log.cli_error, log.cli_dim, log.cli_bold])
    def test_disabled(self, fn):
        assert fn('text') == 'text'

    def test_separator(self):
        assert log.cli_separator() == '─' * 60

    def test_part_label(self):
        assert log.cli_part(ExifPart.GPS_TAGS) == 'gps'
        log.set_color_enabled(True)
        assert '\033[35m' in log.cli_part(ExifPart.GPS_TAGS)


class TestFormatValue:
    def test_rational(self):
        assert log.format_value(Rational(1, 125)) == '1/125'

    def test_bytes(self):
        assert log.format_value(b'abc') == '<3 bytes>'

    def test_sequence(self):
        assert log.format_value((8, 8, 8)) == '[8, 8, 8]'

    def test_truncates_long_text(self):
        text = log.format_value('x' * 200)
        assert len(text) == 60
        assert text.endswith('...')

    def test_entry_line(self):
        line = log.format_entry_line(TagEntry(282, DataType.RATIONAL, Rational(72, 1)))
        assert line.split() == ['282', 'XResolution', 'RATIONAL', '72/1']


class TestLogLines:
    @pytest.mark.parametrize('fn, level', [(log.log_info, 'INFO'),
                                           (log.log_warn, 'WARN'),
                                           (log.log_error, 'ERROR')])
    def test_format(self, fn, level):
        line = fn('message')
        assert re.match(r'^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[' + level + r'\]\s+message$',
                        line)
