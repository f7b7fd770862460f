"""Alphabet validation and lookup tables."""

import pytest

from alphabet import DEFAULT_ALPHABET, Alphabet, alphabet_of_size
from errors import ConfigurationError


class TestAlphabet:

    def test_default_alphabet_has_85_unique_symbols(self):
        assert len(DEFAULT_ALPHABET) == 85
        assert len(set(DEFAULT_ALPHABET)) == 85

    def test_decoding_table_inverts_symbols(self):
        alphabet = Alphabet.from_symbols("abc")
        assert alphabet.base == 3
        assert dict(alphabet.decoding_table) == {"a": 0, "b": 1, "c": 2}
        assert str(alphabet) == "abc"

    def test_accepts_sequence_of_characters(self):
        alphabet = Alphabet.from_symbols(["x", "y"])
        assert alphabet.symbols == ("x", "y")

    def test_decoding_table_is_read_only(self):
        alphabet = Alphabet.from_symbols("01")
        with pytest.raises(TypeError):
            alphabet.decoding_table["2"] = 2

    @pytest.mark.parametrize("size", [2, 256])
    def test_size_bounds_accepted(self, size):
        assert Alphabet.from_symbols(alphabet_of_size(size)).base == size

    @pytest.mark.parametrize("size", [0, 1, 257])
    def test_size_bounds_rejected(self, size):
        symbols = "".join(chr(0x100 + i) for i in range(size))
        with pytest.raises(ConfigurationError):
            Alphabet.from_symbols(symbols)

    def test_duplicate_symbol_rejected(self):
        with pytest.raises(ConfigurationError, match="appears at both index 0 and 2"):
            Alphabet.from_symbols("aba")

    def test_multi_character_symbol_rejected(self):
        with pytest.raises(ConfigurationError):
            Alphabet.from_symbols(["a", "bc"])

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            Alphabet.from_symbols("a")


class TestAlphabetOfSize:

    @pytest.mark.parametrize("size", [2, 10, 85, 86, 200, 256])
    def test_unique_symbols(self, size):
        symbols = alphabet_of_size(size)
        assert len(symbols) == size
        assert len(set(symbols)) == size
        assert not any(ch.isspace() for ch in symbols)

    def test_prefix_of_default(self):
        assert alphabet_of_size(16) == "0123456789abcdef"
