# Bulk byte generation and XOR scrambling on top of the 16-bit LFSR
from rndlfsr import RndLfsr16, InvalidArgument, as_int
import numpy as np
from numba import jit

# JIT-compiled kernel, same steps as RndLfsr16.get_byte() repeated count times
@jit(nopython=True)
def _lfsr_bytes_jit(count, hi, lo, tap_mask):
    out = np.empty(count, dtype=np.uint8)

    for i in range(count):
        # Snapshot of the low byte before the 8 shifts
        out[i] = lo
        for _ in range(8):
            # Manual popcount compatible with Numba
            c = 0
            v = lo & tap_mask
            while v > 0:
                v &= (v - 1)
                c += 1
            feedback = c & 1

            new_lo = (lo >> 1) | ((hi & 1) << 7)
            hi = (hi >> 1) | (feedback << 7)
            lo = new_lo

    return out, hi, lo

def lfsr_bytes(engine: RndLfsr16, count: int) -> bytes:
    """Equivalent to calling engine.get_byte() count times."""
    count = as_int("count", count)
    if count < 0:
        raise InvalidArgument(f"count must not be negative, got {count}")
    if count == 0:
        return b""

    # We pass the raw register bytes to avoid object overhead
    out, hi, lo = _lfsr_bytes_jit(count, engine.state.hi, engine.state.lo, engine.tap_mask)

    engine.state.hi = int(hi)
    engine.state.lo = int(lo)
    engine.state.last_value = int(out[-1])

    return out.tobytes()

class Scrambler:
    def __init__(self, seed=None, cfg=None):
        self.engine = RndLfsr16(cfg)
        if seed is not None:
            # Runtime seed, so guard against the all-zero register
            self.engine.set_seed_word(seed, fix=True)

    def scramble(self, data):
        data_np = np.frombuffer(data, dtype=np.uint8)
        key_np = np.frombuffer(lfsr_bytes(self.engine, len(data_np)), dtype=np.uint8)
        return (data_np ^ key_np).tobytes()

    def descramble(self, data):
        # Descrambling is identical to scrambling due to XOR properties
        return self.scramble(data)

if __name__ == "__main__":
    # Bulk kernel must agree with the bytewise engine
    engine_a = RndLfsr16()
    engine_b = RndLfsr16()
    bulk = lfsr_bytes(engine_a, 1000)
    single = bytes(engine_b.get_byte() for _ in range(1000))
    assert bulk == single, "JIT byte stream differs from get_byte()"
    assert engine_a.word == engine_b.word
    print("JIT byte stream matches get_byte().")

    # A byte stream repeats every 65535 bytes, since 8 * 65535 steps is a whole number of periods
    stream = lfsr_bytes(RndLfsr16(), 65535 + 16)
    assert stream[:16] == stream[65535:], "Unexpected byte stream period"
    print("Byte stream period check passed.")
