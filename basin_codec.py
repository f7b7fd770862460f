import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

from alphabet import DEFAULT_ALPHABET, Alphabet
from arithmetic_coding import DEFAULT_PRECISION, Coder, PrecisionParams, calculate_params
from decoder import Decoder
from encoder import Encoder
from symbolReadWrite import SymbolReader, SymbolWriter
from utils import ByteSource, as_byte_values, bytes_to_text, text_to_bytes

logger = logging.getLogger(__name__)

AlphabetLike = Union[str, Sequence[str]]


@dataclass(frozen=True)
class CodecConfig:
    alphabet: AlphabetLike = DEFAULT_ALPHABET
    precision: int = DEFAULT_PRECISION


class _BasinCodecBase:
    """Alphabet and precision constants shared by every call; never mutated after construction."""

    def __init__(self, alphabet: Optional[AlphabetLike] = None, config: Optional[CodecConfig] = None):
        if alphabet is not None and config is not None:
            raise ValueError("pass either alphabet or config, not both")
        if config is None:
            config = CodecConfig() if alphabet is None else CodecConfig(alphabet=alphabet)
        self.config = config
        self.alphabet = Alphabet.from_symbols(config.alphabet)
        self.params: PrecisionParams = calculate_params(self.alphabet.base, config.precision)
        logger.debug(
            "configured base %d: msd_divisor=%d max_digits_to_emit=%d max_digits_to_decode=%d",
            self.alphabet.base,
            self.params.msd_divisor,
            self.params.max_digits_to_emit,
            self.params.max_digits_to_decode,
        )

    @property
    def base(self) -> int:
        return self.alphabet.base


class BasinEncoder(_BasinCodecBase):
    """Encode binary or string data to base-n text."""

    def encode(self, data: ByteSource) -> str:
        values = as_byte_values(data)

        writer = SymbolWriter(self.alphabet.symbols)
        enc = Encoder(Coder(self.params), writer)
        enc.encode_all(values)
        encoded = enc.finish()

        logger.debug("encoded %d bytes into %d symbols", len(values), len(encoded))
        return encoded

    def encode_from_string(self, text: str) -> str:
        return self.encode(text_to_bytes(text))


class BasinDecoder(_BasinCodecBase):
    """Decode base-n text to binary or string data."""

    def decode(self, encoded_text: str) -> Iterator[int]:
        """
        Return a lazy iterator over the decoded byte values.

        The empty-input and terminator checks run here; an unknown character
        further in is reported when iteration reaches it.
        """
        reader = SymbolReader(encoded_text, self.alphabet.decoding_table)
        return Decoder(Coder(self.params), reader)

    def decode_bytes(self, encoded_text: str) -> bytes:
        return bytes(self.decode(encoded_text))

    def decode_to_string(self, encoded_text: str) -> str:
        return bytes_to_text(self.decode_bytes(encoded_text))


_default_encoder: Optional[BasinEncoder] = None
_default_decoder: Optional[BasinDecoder] = None


def _encoder() -> BasinEncoder:
    global _default_encoder
    if _default_encoder is None:
        _default_encoder = BasinEncoder()
    return _default_encoder


def _decoder() -> BasinDecoder:
    global _default_decoder
    if _default_decoder is None:
        _default_decoder = BasinDecoder()
    return _default_decoder


def encode(data: ByteSource) -> str:
    return _encoder().encode(data)


def decode(encoded_text: str) -> bytes:
    return _decoder().decode_bytes(encoded_text)


def encode_from_string(text: str) -> str:
    return _encoder().encode_from_string(text)


def decode_to_string(encoded_text: str) -> str:
    return _decoder().decode_to_string(encoded_text)
