# 16-bit LFSR pseudo random bit/byte generator
#
# hi                                 lo
# | 7 | 6 | 5 | 4 | 3 | 2 | 1 | 0 |->| 7 | 6 | 5 | 4 | 3 | 2 | 1 | 0 |-> out
#   ^                                          |       |   |       |
#   |                                          |       |    \     /
#   |                                          |       |      XOR
#   |                                          |      XOR------
# | F |<--------------------------------------XOR------
#
# Both bytes shift right together. The bit leaving hi enters bit 7 of lo,
# the bit leaving lo is the output and the feedback F enters bit 7 of hi.
from config import Config
import operator


class InvalidArgument(ValueError):
    pass


def as_int(name, value):
    # Accepts int and numpy integer scalars, stores a plain int
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}") from None


def _check_u8(name, value):
    value = as_int(name, value)
    if not 0 <= value <= 0xFF:
        raise InvalidArgument(f"{name} must be in range 0..255, got {value}")
    return value


class LfsrState:
    __slots__ = ("hi", "lo", "last_value")

    def __init__(self, hi: int = 0, lo: int = 0):
        self.hi = hi
        self.lo = lo
        # Last value handed out by get_bit / get_bits / get_byte
        self.last_value = 0

    @property
    def word(self) -> int:
        return (self.hi << 8) | self.lo

    def __repr__(self):
        return f"LfsrState(hi={self.hi:#04x}, lo={self.lo:#04x}, last_value={self.last_value:#04x})"


class RndLfsr16:
    """
    Deterministic generator over a 16-bit Fibonacci LFSR.

    Every output is built from advance_bit(), which runs the feedback
    and shift process once. A register of all zeros never changes, so
    callers seeding at runtime should follow set_seed() with fix_seed().
    """
    def __init__(self, cfg: Config | None = None):
        self.cfg = cfg if cfg is not None else Config()
        self.tap_mask = self.cfg.tap_mask
        self.state = LfsrState()
        self.init()

    def init(self) -> None:
        self.set_seed_word(self.cfg.default_seed)
        self.state.last_value = 0

    def set_seed(self, hi: int, lo: int) -> None:
        # Unguarded, (0, 0) is accepted here
        hi = _check_u8("hi", hi)
        lo = _check_u8("lo", lo)
        self.state.hi, self.state.lo = hi, lo

    def set_seed_word(self, seed: int, fix: bool = False) -> None:
        seed = as_int("seed", seed)
        if not 0 <= seed <= 0xFFFF:
            raise InvalidArgument(f"seed must be a 16-bit value, got {seed:#x}")
        self.set_seed(seed >> 8, seed & 0xFF)
        if fix:
            self.fix_seed()

    def fix_seed(self) -> None:
        if self.state.hi == 0 and self.state.lo == 0:
            fallback = self.cfg.fallback_seed
            self.state.hi = fallback >> 8
            self.state.lo = fallback & 0xFF

    @property
    def word(self) -> int:
        return self.state.word

    def seed_state(self) -> tuple[int, int]:
        return self.state.hi, self.state.lo

    def advance_bit(self) -> int:
        st = self.state
        lo = st.lo
        output_bit = lo & 1

        # Requires Python 3.10+
        feedback = (lo & self.tap_mask).bit_count() & 1

        st.lo = (lo >> 1) | ((st.hi & 1) << 7)
        st.hi = (st.hi >> 1) | (feedback << 7)

        return output_bit

    def advance_bits(self, n: int) -> None:
        _check_u8("n", n)
        for _ in range(n):
            self.advance_bit()

    def get_bit(self) -> int:
        self.state.last_value = self.advance_bit()
        return self.state.last_value

    def get_bits(self, n: int) -> int:
        """
        Returns n (1-8) fresh bits, the first one produced in bit 0.
        Note the ordering is the opposite of get_byte().
        """
        n = as_int("n", n)
        if not 1 <= n <= 8:
            raise InvalidArgument(f"get_bits takes 1 to 8 bits, got {n}")
        value = 0
        for i in range(n):
            value |= self.advance_bit() << i
        self.state.last_value = value
        return value

    def get_byte(self) -> int:
        """
        Returns the low register byte as it stands, then advances the
        register 8 steps so the next call sees a fully shifted byte.
        """
        value = self.state.lo
        for _ in range(8):
            self.advance_bit()
        self.state.last_value = value
        return value


def measure_period(seed: int, limit: int | None = None, cfg: Config | None = None) -> int | None:
    """Steps a fresh engine from seed until it recurs, None if limit is hit first."""
    engine = RndLfsr16(cfg)
    engine.set_seed_word(seed)
    if limit is None:
        limit = engine.cfg.period + 1
    start = engine.word
    for count in range(1, limit + 1):
        engine.advance_bit()
        if engine.word == start:
            return count
    return None


if __name__ == "__main__":
    cfg = Config()
    cfg.describe()

    period = measure_period(cfg.default_seed, cfg=cfg)
    print(f"Measured period from {cfg.default_seed:#06x}: {period}")
    assert period == cfg.period, "LFSR is not maximal length"

    # The all-zero register is a fixed point
    assert measure_period(0, limit=1000, cfg=cfg) == 1, "Zero register should map onto itself"

    engine = RndLfsr16(cfg)
    print(f"Bits: {[engine.get_bit() for _ in range(16)]}")
    print(f"Nybbles: {[engine.get_bits(4) for _ in range(8)]}")
    print(f"Bytes: {bytes(engine.get_byte() for _ in range(8)).hex()}")
    print(f"Final state: {engine.state}")
