import logging
from dataclasses import dataclass
from typing import Optional

from errors import ConfigurationError
from symbolReadWrite import SymbolReader, SymbolWriter

logger = logging.getLogger(__name__)

MIN_PRECISION = 48
DEFAULT_PRECISION = 64


@dataclass(frozen=True)
class PrecisionParams:
    base: int
    msd_divisor: int             # place value of the leading output digit
    second_msd_divisor: int      # msd_divisor // base
    max_digits_to_emit: int      # settle/defer steps allowed per byte
    max_digits_to_decode: int    # digits held by the decoder window
    word_limit: int              # every intermediate product stays below this

    @property
    def width(self) -> int:
        """Size of the full working interval, base ** max_digits_to_decode."""
        return self.msd_divisor * self.base


def calculate_params(base: int, precision: int = DEFAULT_PRECISION) -> PrecisionParams:
    """
    Derive the fixed-precision constants for an output base.

    The working width is the largest power of base not exceeding
    2^(precision - 8) - 1, which leaves room for the multiply-by-256 in
    interval narrowing and in byte recovery.
    """
    if precision < MIN_PRECISION:
        raise ConfigurationError(f"precision must be at least {MIN_PRECISION} bits")
    if not 2 <= base <= 256:
        raise ConfigurationError("base must be between 2 and 256")

    ceiling = (1 << (precision - 8)) - 1
    acc = 1
    digits = 0
    while acc <= ceiling:
        acc *= base
        digits += 1
    msd_divisor = acc // (base * base)
    second_msd_divisor = msd_divisor // base

    # digits needed for one byte plus one step for a carry deferral; with
    # only the bare digit count a short final byte can exit while lo and hi
    # still share a leading digit
    per_byte = 0
    tmp = 1
    while tmp < 0x100:
        tmp *= base
        per_byte += 1

    return PrecisionParams(
        base=base,
        msd_divisor=msd_divisor,
        second_msd_divisor=second_msd_divisor,
        max_digits_to_emit=per_byte + 1,
        max_digits_to_decode=digits - 1,
        word_limit=1 << precision,
    )


class Coder:
    """Interval state for a single encode or decode call."""

    def __init__(self, params: PrecisionParams):
        self.params = params
        self.base = params.base
        self.msd = params.msd_divisor
        self.smsd = params.second_msd_divisor

        # working state (integers)
        self.lo = 0
        self.hi = params.width - 1
        self.bytes_coded = 0

        # encoder: deferred digits and the leading digit seen when they began
        self.digits_pending = 0
        self.pending_hi_msd = 0

        # decoder: digit window and outstanding requests
        self.window = 0
        self.requested = 0
        self.requested_keep_msd = 0
        self.last_digit = False

        self.output: Optional[SymbolWriter] = None
        self.input: Optional[SymbolReader] = None

    # --- interval narrowing, shared by both directions ---
    def narrow(self, byte: int) -> None:
        r = self.hi - self.lo + 1
        assert r * 256 < self.params.word_limit, "narrow: interval product overflows word"
        next_lo = self.lo + -(-r * byte // 256)
        next_hi = self.lo + -(-r * (byte + 1) // 256) - 1
        self.lo = next_lo
        self.hi = next_hi

    def _straddles_carry(self, lo_msd: int, hi_msd: int) -> bool:
        return (
            hi_msd - lo_msd == 1
            and (self.lo // self.smsd) % self.base == self.base - 1
            and (self.hi // self.smsd) % self.base == 0
        )

    def _collapse_second_digit(self, lo_msd: int, hi_msd: int) -> None:
        self.lo = lo_msd * self.msd + self.lo % self.smsd * self.base
        self.hi = hi_msd * self.msd + self.hi % self.smsd * self.base

    def _shift(self) -> None:
        self.lo = self.lo % self.msd * self.base
        self.hi = self.hi % self.msd * self.base

    # --- encoder renormalisation: emit digits to writer ---
    def _output_digits(self) -> None:
        assert self.output is not None, "_output_digits: no SymbolWriter"
        for _ in range(self.params.max_digits_to_emit):
            lo_msd = self.lo // self.msd
            hi_msd = self.hi // self.msd
            if lo_msd == hi_msd:
                self.output.write_digit(hi_msd)
                if self.digits_pending > 0:
                    fill = 0 if hi_msd == self.pending_hi_msd else self.base - 1
                    self.output.write_run(fill, self.digits_pending)
                    self.digits_pending = 0
                self._shift()
            elif self._straddles_carry(lo_msd, hi_msd):
                # carry undecided: keep the leading digit, postpone the next one
                self._collapse_second_digit(lo_msd, hi_msd)
                if self.digits_pending == 0:
                    self.pending_hi_msd = hi_msd
                self.digits_pending += 1
            else:
                break

    # --- decoder renormalisation: schedule digits to pull from reader ---
    def _discard_digits(self) -> None:
        for _ in range(self.params.max_digits_to_emit):
            lo_msd = self.lo // self.msd
            hi_msd = self.hi // self.msd
            if lo_msd == hi_msd:
                self._shift()
                self.requested += 1
            elif self._straddles_carry(lo_msd, hi_msd):
                self._collapse_second_digit(lo_msd, hi_msd)
                self.requested += 1
                self.requested_keep_msd += 1
            else:
                break

    def _fill_window(self) -> None:
        assert self.input is not None, "_fill_window: no SymbolReader"
        while self.requested > 0:
            digit = self.input.read_digit()
            if self.input.overrun == self.params.max_digits_to_decode - 1:
                self.last_digit = True
            if self.requested == self.requested_keep_msd:
                window_msd = self.window // self.msd
                self.window = window_msd * self.msd + self.window % self.smsd * self.base + digit
                self.requested_keep_msd -= 1
            else:
                self.window = self.window % self.msd * self.base + digit
            self.requested -= 1

    # --- public methods to start/finish encoding and decoding ---
    def start_encode(self, output: SymbolWriter) -> None:
        self.output = output
        self.lo = 0
        self.hi = self.params.width - 1
        self.digits_pending = 0
        self.bytes_coded = 0

    def start_decode(self, input: SymbolReader) -> None:
        self.input = input
        self.lo = 0
        self.hi = self.params.width - 1
        self.window = 0
        self.requested = self.params.max_digits_to_decode
        self.requested_keep_msd = 0
        self.last_digit = False
        self.bytes_coded = 0

    def encode_byte(self, byte: int) -> None:
        self.narrow(byte)
        self._output_digits()
        self.bytes_coded += 1

    def next_candidate(self) -> int:
        """Pull the digits the last byte shifted out and recover the next byte value."""
        self._fill_window()
        r = self.hi - self.lo + 1
        return 256 * (self.window - self.lo) // r

    def decode_byte(self, byte: int) -> None:
        self.narrow(byte)
        self._discard_digits()
        self.bytes_coded += 1

    def finish_encode(self) -> None:
        assert self.output is not None
        # no further carry can arrive, so pending digits resolve against hi
        self.output.write_digit(self.hi // self.msd)
        if self.digits_pending > 0:
            self.output.write_run(0, self.digits_pending)
            self.digits_pending = 0
        self.output.write_digit(self.bytes_coded % 2)
        logger.debug("finish_encode: %d bytes coded in base %d", self.bytes_coded, self.base)
