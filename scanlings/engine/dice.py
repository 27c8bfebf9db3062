# scanlings/engine/dice.py
MASK32 = 0xFFFFFFFF


class XorShift32:
    """
    Minimal 32-bit xorshift (13/17/5). The only randomness source inside a battle.
    Same seed, same sequence; a zero state is remapped to 1.
    """

    def __init__(self, seed: int) -> None:
        self.seed = int(seed) & MASK32
        self.state = self.seed or 1

    def next_u32(self) -> int:
        x = self.state
        x ^= (x << 13) & MASK32
        x ^= x >> 17
        x ^= (x << 5) & MASK32
        self.state = x
        return x

    def rand01(self) -> float:
        # Closed interval: a state of 0xFFFFFFFF yields exactly 1.0.
        return self.next_u32() / MASK32

    def below(self, n: int) -> int:
        """floor(rand01 * n); may return n on the 1.0 edge."""
        return int(self.rand01() * n)

    def chance(self, p: float) -> bool:
        return self.rand01() < p

    def pick(self, options):
        if not options:
            raise ValueError("cannot pick from an empty sequence")
        return options[min(self.below(len(options)), len(options) - 1)]


def rng_for(seed: int) -> XorShift32:
    # deterministic per battle seed
    return XorShift32(seed)
