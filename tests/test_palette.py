"""Tests for ramp_tool.core.palette: hex parsing and formatting."""

import pytest
from ramp_tool.core.errors import InvalidColourFormat
from ramp_tool.core.palette import channel_to_hex, hex_to_rgb, normalise_hex, rgb_to_hex
from ramp_tool.core.types import Rgb


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == Rgb(1.0, 1.0, 1.0)

    def test_black(self):
        assert hex_to_rgb('#000000') == Rgb(0.0, 0.0, 0.0)

    def test_blue(self):
        c = hex_to_rgb('#0066ff')
        assert c.r == 0.0
        assert c.g == pytest.approx(102 / 255)
        assert c.b == 1.0

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == Rgb(1.0, 1.0, 1.0)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == Rgb(1.0, 0.0, 0.0)

    @pytest.mark.parametrize('value', ['not-a-color', 'invalid', '#ff', '#fff', '#ffffffff', '#gggggg', ''])
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidColourFormat):
            hex_to_rgb(value)

    @pytest.mark.parametrize('value', ['#١٢٣٤٥٦', '００６６ff'])
    def test_non_ascii_digits_rejected(self, value):
        with pytest.raises(InvalidColourFormat):
            hex_to_rgb(value)

    @pytest.mark.parametrize('value', ['  #0066ff', '#0066ff\n', ' 0066ff ', '#0066ff\t'])
    def test_surrounding_whitespace_rejected(self, value):
        with pytest.raises(InvalidColourFormat):
            hex_to_rgb(value)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb('nope')

    def test_error_names_value(self):
        with pytest.raises(InvalidColourFormat) as exc:
            hex_to_rgb('#12345')
        assert exc.value.value == '#12345'
        assert '#12345' in str(exc.value)


class TestRgbToHex:
    def test_white(self):
        assert rgb_to_hex(Rgb(1.0, 1.0, 1.0)) == '#ffffff'

    def test_lowercase_zero_padded(self):
        assert rgb_to_hex(Rgb(0.0, 1 / 255, 10 / 255)) == '#00010a'

    def test_round_half(self):
        # round(0.5 * 255) == 128
        assert channel_to_hex(0.5) == '80'

    def test_clamps_out_of_range(self):
        assert rgb_to_hex(Rgb(1.5, -0.2, 0.0)) == '#ff0000'

    def test_parse_format_identity(self):
        assert rgb_to_hex(hex_to_rgb('#2563eb')) == '#2563eb'


class TestNormaliseHex:
    def test_adds_hash_and_lowercases(self):
        assert normalise_hex('0066FF') == '#0066ff'
