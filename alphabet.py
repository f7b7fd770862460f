from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple, Union

from errors import ConfigurationError

DEFAULT_ALPHABET = (
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "!@#$%^*()-=;,./_+{}|:?~"
)
MIN_ALPHABET_SIZE = 2
# an alphabet larger than the number of byte values would break narrowing
MAX_ALPHABET_SIZE = 256


@dataclass(frozen=True)
class Alphabet:
    """
    Ordered output symbols and the inverse symbol -> digit table.

    Symbols must be single characters and unique; digit ``i`` is written as
    ``symbols[i]``.
    """

    symbols: Tuple[str, ...]
    decoding_table: Mapping[str, int] = field(repr=False, compare=False)

    @classmethod
    def from_symbols(cls, alphabet: Union[str, Sequence[str]]) -> "Alphabet":
        symbols = tuple(alphabet)
        if len(symbols) < MIN_ALPHABET_SIZE:
            raise ConfigurationError(f"alphabet must have at least {MIN_ALPHABET_SIZE} characters")
        if len(symbols) > MAX_ALPHABET_SIZE:
            raise ConfigurationError(f"alphabet must not contain more than {MAX_ALPHABET_SIZE} characters")

        table = {}
        for index, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ConfigurationError(f"alphabet symbol at index {index} must be a single character, got {symbol!r}")
            if symbol in table:
                raise ConfigurationError(
                    f"alphabet symbol {symbol!r} appears at both index {table[symbol]} and {index}"
                )
            table[symbol] = index
        return cls(symbols=symbols, decoding_table=MappingProxyType(table))

    @property
    def base(self) -> int:
        return len(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return "".join(self.symbols)


def alphabet_of_size(base: int) -> str:
    """
    A ready-made alphabet with ``base`` symbols.

    A prefix of the default alphabet when it is long enough, otherwise a
    contiguous run of Latin Extended characters starting at U+0100.
    """
    if base <= len(DEFAULT_ALPHABET):
        return DEFAULT_ALPHABET[:base]
    return "".join(chr(0x100 + i) for i in range(base))
