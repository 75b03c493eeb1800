"""
Tests for conversion traces.
"""

from riskscores.formatting import render_decoding, render_encoding


class TestRenderEncoding:
    """Test the packing trace."""

    def test_short_form(self):
        assert render_encoding([3, 4, 5, 4, 3, 4, 2]) == "3360820354"

    def test_verbose_form(self):
        lines = render_encoding([3, 4, 31], 5, verbose=True).splitlines()
        assert lines == [
            "1. Decimal notations:     3 |     4 |    31",
            "2. Binary notations:  00011 | 00100 | 11111 => 000110010011111",
            "3. Decimal notation:  3231 = 000110010011111",
        ]

    def test_empty(self):
        assert render_encoding([]) == "0"


class TestRenderDecoding:
    """Test the unpacking trace."""

    def test_short_form(self):
        assert render_decoding(3360820354) == "[3, 4, 5, 4, 3, 4, 2]"

    def test_verbose_form(self):
        lines = render_decoding(3231, 3, 5, verbose=True).splitlines()
        assert lines == [
            "1. Binary number:      000110010011111",
            "2. Binary notations:   00011 | 00100 | 11111",
            "3. Decimal notations:      3 |     4 |    31",
        ]

    def test_verbose_overflow_shows_extra_chunk(self):
        lines = render_decoding(2 ** 10, 2, 5, verbose=True).splitlines()
        assert lines[1] == "2. Binary notations:   10000 | 00000 | 0"
