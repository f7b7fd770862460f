import math
import operator
from typing import Iterable, List, Union

WHITESPACE = frozenset(" \n\r\t\v\f\u00a0\u2028\u2029")

ByteSource = Union[bytes, bytearray, memoryview, Iterable[int]]


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def text_to_bytes(text: str) -> bytes:
    return text.encode("utf-8")


def bytes_to_text(data: Iterable[int]) -> str:
    return bytes(data).decode("utf-8")


def as_byte_values(data: ByteSource) -> List[int]:
    """
    Return data as a list of ints in [0, 255].
    - bytes-like objects are taken as they are
    - any other iterable is checked value by value; a value out of range raises ValueError
    """
    if isinstance(data, (bytes, bytearray)):
        return list(data)
    if isinstance(data, memoryview):
        return list(data.tobytes())
    if isinstance(data, str):
        raise TypeError("encode expects bytes; use encode_from_string for text")

    values = []
    for i, value in enumerate(data):
        value = operator.index(value)
        if not 0 <= value <= 255:
            raise ValueError(f"byte value {value!r} at index {i} is outside [0, 255]")
        values.append(value)
    return values


def theoretical_symbols_per_byte(base: int) -> float:
    """Lower bound on output symbols per input byte for an alphabet of this size."""
    if base < 2:
        raise ValueError("base must be at least 2")
    return 8 / math.log2(base)


def expected_encoded_length(num_bytes: int, base: int) -> int:
    """Approximate encoded length: the information content plus one leading digit and the terminator."""
    return math.ceil(num_bytes * theoretical_symbols_per_byte(base)) + 2
