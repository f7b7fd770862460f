"""Tests for the precision calculator and the shared interval arithmetic."""

import pytest

from alphabet import DEFAULT_ALPHABET, alphabet_of_size
from arithmetic_coding import Coder, MIN_PRECISION, calculate_params
from basin_codec import BasinEncoder
from encoder import Encoder
from errors import ConfigurationError
from symbolReadWrite import SymbolWriter


class TestCalculateParams:
    """Precision constants derived from the alphabet size."""

    def test_base_256_default_precision(self):
        params = calculate_params(256)
        assert params.msd_divisor == 1 << 40
        assert params.second_msd_divisor == 1 << 32
        assert params.max_digits_to_decode == 6
        assert params.max_digits_to_emit == 2
        assert params.width == 1 << 48

    def test_base_2_default_precision(self):
        params = calculate_params(2)
        assert params.msd_divisor == 1 << 54
        assert params.second_msd_divisor == 1 << 53
        assert params.max_digits_to_decode == 55
        assert params.max_digits_to_emit == 9

    def test_base_10_at_minimum_precision(self):
        params = calculate_params(10, precision=48)
        assert params.msd_divisor == 10 ** 11
        assert params.second_msd_divisor == 10 ** 10
        assert params.max_digits_to_decode == 12
        assert params.max_digits_to_emit == 4

    @pytest.mark.parametrize("base", [2, 3, 7, 10, 16, 85, 100, 128, 200, 255, 256])
    @pytest.mark.parametrize("precision", [48, 56, 64, 128])
    def test_width_is_largest_power_under_ceiling(self, base, precision):
        params = calculate_params(base, precision)
        ceiling = (1 << (precision - 8)) - 1
        assert params.width == base ** params.max_digits_to_decode
        assert params.width <= ceiling < params.width * base
        assert params.second_msd_divisor * base == params.msd_divisor
        # every narrowing product fits the word
        assert params.width * 256 < params.word_limit
        assert params.max_digits_to_decode >= 3

    @pytest.mark.parametrize("base", [2, 3, 15, 16, 17, 255, 256])
    def test_emit_steps_cover_one_byte(self, base):
        params = calculate_params(base)
        digits = params.max_digits_to_emit - 1
        assert base ** digits >= 256
        assert base ** (digits - 1) < 256

    def test_deterministic(self):
        assert calculate_params(85) == calculate_params(85)

    def test_precision_too_small(self):
        with pytest.raises(ConfigurationError):
            calculate_params(85, precision=MIN_PRECISION - 1)

    @pytest.mark.parametrize("base", [0, 1, 257])
    def test_base_out_of_range(self, base):
        with pytest.raises(ConfigurationError):
            calculate_params(base)


class TestCoder:
    """Interval narrowing and digit emission on a 256-symbol alphabet."""

    @pytest.fixture
    def params(self):
        return calculate_params(256)

    def test_fresh_interval_spans_width(self, params):
        coder = Coder(params)
        assert coder.lo == 0
        assert coder.hi == params.width - 1

    def test_narrow_lowest_byte(self, params):
        coder = Coder(params)
        coder.narrow(0)
        assert coder.lo == 0
        assert coder.hi == (1 << 40) - 1

    def test_narrow_highest_byte(self, params):
        coder = Coder(params)
        coder.narrow(255)
        assert coder.lo == 255 << 40
        assert coder.hi == (1 << 48) - 1

    @pytest.mark.parametrize("byte", [0, 1, 127, 128, 254, 255])
    def test_narrow_partitions_interval(self, params, byte):
        lower = Coder(params)
        lower.narrow(byte)
        if byte < 255:
            upper = Coder(params)
            upper.narrow(byte + 1)
            assert upper.lo == lower.hi + 1
        assert lower.lo <= lower.hi

    def test_settled_digit_is_written(self, params):
        symbols = [chr(0x100 + i) for i in range(256)]
        writer = SymbolWriter(symbols)
        coder = Coder(params)
        coder.start_encode(writer)
        coder.encode_byte(0)
        assert writer.getvalue() == symbols[0]
        assert coder.lo == 0
        assert coder.hi == (1 << 48) - 256

    def test_finish_writes_leading_digit_and_parity(self, params):
        symbols = [chr(0x100 + i) for i in range(256)]
        writer = SymbolWriter(symbols)
        coder = Coder(params)
        coder.start_encode(writer)
        coder.encode_byte(0)
        coder.finish_encode()
        assert writer.getvalue() == symbols[0] + symbols[255] + symbols[1]


class TestEncoder:

    def test_byte_at_a_time_matches_codec(self):
        data = b"one byte at a time \x00\xff"
        encoder = Encoder(Coder(calculate_params(85)), SymbolWriter(DEFAULT_ALPHABET))
        for byte in data:
            encoder.encode_byte(byte)
        assert encoder.finish() == BasinEncoder().encode(data)

    def test_encode_all_after_single_bytes(self):
        params = calculate_params(16)
        writer = SymbolWriter(alphabet_of_size(16))
        encoder = Encoder(Coder(params), writer)
        encoder.encode_byte(0x41)
        encoder.encode_all(b"BC")
        assert encoder.finish() == BasinEncoder(alphabet=alphabet_of_size(16)).encode(b"ABC")
