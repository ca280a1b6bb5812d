from config import Config
from rndlfsr import RndLfsr16
from scrambler import lfsr_bytes
import sys


def dump(seed, count, output_filename, cfg):
    engine = RndLfsr16(cfg)
    engine.set_seed_word(seed)
    # Seed comes from the command line and may be zero
    engine.fix_seed()
    if engine.word != seed:
        print(f"Seed {seed:#06x} would lock the register, using {engine.word:#06x} instead")

    written = 0
    with open(output_filename, "wb") as f:
        while written < count:
            n = min(cfg.block_size, count - written)
            f.write(lfsr_bytes(engine, n))
            written += n
            print(f"\rWritten {written}/{count} bytes", end='', flush=True)
    print()

    return engine


if __name__ == "__main__":
    assert len(sys.argv) == 3 or len(sys.argv) == 4, "Usage: python rnd_dump.py <seed_hex> <count> [output_file]"

    cfg = Config()
    seed = int(sys.argv[1], 16)
    count = int(sys.argv[2])
    assert 0 <= seed <= 0xFFFF, "Seed must be a 16-bit hex value"
    assert count >= 0, "Count must not be negative"
    output_filename = sys.argv[3] if len(sys.argv) == 4 else "rnd_output.bin"

    print(f"Generating {count} bytes from seed {seed:#06x} into {output_filename}")
    engine = dump(seed, count, output_filename, cfg)
    print(f"Final register state: {engine.state}")
