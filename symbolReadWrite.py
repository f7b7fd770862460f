import logging
from typing import Mapping, Sequence

from errors import InputError
from utils import is_whitespace

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024


# -----------------------
# Alphabet symbol IO
# -----------------------
class SymbolWriter:
    def __init__(self, symbols: Sequence[str]):
        self._symbols = symbols
        self._chunks = []
        self._current = []
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def write_digit(self, digit: int) -> None:
        if len(self._current) >= CHUNK_SIZE:
            self._chunks.append("".join(self._current))
            self._current = []
        self._current.append(self._symbols[digit])
        self._count += 1

    def write_run(self, digit: int, count: int) -> None:
        for _ in range(count):
            self.write_digit(digit)

    def getvalue(self) -> str:
        return "".join(self._chunks) + "".join(self._current)


class SymbolReader:
    """
    Reads digit values from encoded text, front to back.

    The final character is the parity terminator and is never returned as a
    digit. Whitespace that is not an alphabet symbol is skipped. Once the
    text is used up every further read returns 0, and ``overrun`` counts how
    many of those padding digits have been handed out.
    """

    def __init__(self, text: str, table: Mapping[str, int]):
        if not text:
            logger.debug("rejecting empty input")
            raise InputError("invalid input string: empty input")
        end = len(text) - 1
        parity = table.get(text[end])
        if parity is None or parity > 1:
            logger.debug("rejecting input with terminator %r", text[end])
            raise InputError("invalid input string: missing or invalid terminator")

        self._text = text
        self._table = table
        self._end = end
        self._pos = 0
        self.parity = parity
        self.overrun = 0

    def read_digit(self) -> int:
        while self._pos < self._end:
            ch = self._text[self._pos]
            self._pos += 1
            digit = self._table.get(ch)
            if digit is not None:
                return digit
            if not is_whitespace(ch):
                logger.debug("rejecting unknown character %r at %d", ch, self._pos - 1)
                raise InputError(f"invalid input string: unexpected character {ch!r} at position {self._pos - 1}")
        # No more symbols -> return 0 (termination padding)
        self.overrun += 1
        return 0
