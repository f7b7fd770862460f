import logging
from typing import Iterator
from arithmetic_coding import Coder
from errors import InputError
from symbolReadWrite import SymbolReader

logger = logging.getLogger(__name__)

class Decoder(Iterator[int]):
    """Forward-only iterator over the bytes held in one encoded text."""

    def __init__(self, coder: Coder, reader: SymbolReader):
        self.coder = coder
        self.reader = reader
        self.done = False
        self.coder.start_decode(reader)

    def _checked(self, byte: int) -> int:
        if not 0 <= byte <= 255:
            self.done = True
            logger.debug("digit window left the coding interval after %d bytes", self.coder.bytes_coded)
            raise InputError("invalid input string: text is not a valid encoding")
        return byte

    def decode_byte(self) -> int:
        """
        Decode one byte and update coder state.
        Raises StopIteration once the terminator has been accounted for.
        """
        if self.done:
            raise StopIteration

        try:
            byte = self.coder.next_candidate()
        except InputError:
            self.done = True
            raise

        if self.coder.last_digit:
            # the padding has reached the terminal state; the parity says
            # whether this last candidate is data or an artefact of the padding
            self.done = True
            if self.coder.bytes_coded % 2 != self.reader.parity:
                return self._checked(byte)
            raise StopIteration

        self.coder.decode_byte(self._checked(byte))
        return byte

    def __next__(self) -> int:
        return self.decode_byte()
