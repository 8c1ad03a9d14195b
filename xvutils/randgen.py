"""Park-Miller minimal standard pseudo-random number generator."""

from __future__ import annotations

_MODULUS = 0x7FFFFFFF
_U64_MASK = 0xFFFFFFFFFFFFFFFF


def do_rand(ctx: int) -> int:
    """Advance the generator state ``ctx`` and return the new state.

    The returned value is both the random number, in ``[0, 0x7ffffffd]``,
    and the state to pass to the next call.
    """
    if ctx < 0:
        raise ValueError("state must not be negative")
    x = ((ctx & _U64_MASK) % 0x7FFFFFFE) + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += _MODULUS
    return x - 1


class ParkMillerRandom:
    """Stateful wrapper around :func:`do_rand`."""

    def __init__(self, seed: int = 1) -> None:
        if seed < 0:
            raise ValueError("seed must not be negative")
        self.state = seed & _U64_MASK

    def rand(self) -> int:
        """Return the next pseudo-random number."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.rand()