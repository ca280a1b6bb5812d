class Config:
    def __init__(self, default_seed=0xACE1, fallback_seed=0x0001, block_size=4096):
        self.register_bits = 16
        self.register_mask = (1 << self.register_bits) - 1

        # Taps are read from the low byte of the register
        # x^16 + x^14 + x^13 + x^11 + 1, maximal length
        self.taps = (0, 2, 3, 5)
        self.tap_mask = 0
        for t in self.taps:
            self.tap_mask |= (1 << t)
        assert all(0 <= t < 8 for t in self.taps), "Taps must be within the low byte"

        # Seed used by init(), same value as the original usage example
        self.default_seed = default_seed
        # Replacement for an all-zero register in fix_seed()
        self.fallback_seed = fallback_seed
        assert 0 < self.default_seed <= self.register_mask, "Default seed must be a non-zero 16-bit value"
        assert 0 < self.fallback_seed <= self.register_mask, "Fallback seed must be a non-zero 16-bit value"

        # Bytes generated per write when dumping a stream to disk
        self.block_size = block_size
        assert self.block_size > 0, "Block size must be positive"

        self.period = (1 << self.register_bits) - 1

    def describe(self):
        print(f"Register: {self.register_bits} bits, taps {list(self.taps)} (mask {self.tap_mask:#04x})")
        print(f"Default seed: {self.default_seed:#06x}, fallback seed: {self.fallback_seed:#06x}")
        print(f"Expected period: {self.period} steps")
        print(f"Block size: {self.block_size} bytes")
