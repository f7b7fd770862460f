from typing import Iterable
from arithmetic_coding import Coder
from symbolReadWrite import SymbolWriter

class Encoder:
    def __init__(self, coder: Coder, writer: SymbolWriter):
        self.coder = coder
        self.writer = writer
        self.coder.start_encode(writer)

    def encode_byte(self, byte: int) -> None:
        """
        Encode one byte value (0..255).
        The byte selects the sub-interval [byte/256, (byte+1)/256) of the current interval.
        """
        self.coder.encode_byte(byte)

    def encode_all(self, data: Iterable[int]) -> None:
        for byte in data:
            self.encode_byte(byte)

    def finish(self) -> str:
        self.coder.finish_encode()
        return self.writer.getvalue()
