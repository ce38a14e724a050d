# islandgen/core/rng.py
from __future__ import annotations
from typing import Any, List, Sequence, TypeVar, Union

T = TypeVar("T")

_MASK64 = 0xFFFFFFFFFFFFFFFF
# golden ratio for 64-bit
_DEF_CONST = 0x9E3779B97F4A7C15


def _splitmix64(x: int) -> int:
    x = (x + _DEF_CONST) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    return z ^ (z >> 31)


def seed_from_any(x: Union[int, str, bytes]) -> int:
    if isinstance(x, bool):
        raise TypeError("Unsupported seed type")
    if isinstance(x, int):
        return x & _MASK64
    if isinstance(x, bytes):
        acc = 0xcbf29ce484222325
        for b in x:
            acc ^= b
            acc = (acc * 0x100000001B3) & _MASK64
        return acc
    if isinstance(x, str):
        return seed_from_any(x.encode("utf-8"))
    raise TypeError("Unsupported seed type")


def hash64(*vals: int) -> int:
    h = 0x84222325CBF29CE4
    for v in vals:
        h ^= v & _MASK64
        h = _splitmix64(h)
    return h


def stage_seeds(seed: int, layer_count: int) -> List[int]:
    """
    Сиды для каждого слоя мира. Слой i получает свой сид, поэтому
    добавление слоя сверху не меняет слои под ним.
    """
    return [hash64(seed, i) for i in range(layer_count)]


class RNG:
    __slots__ = ("state",)

    def __init__(self, seed: int):
        self.state = seed & _MASK64

    def u64(self) -> int:
        self.state = _splitmix64(self.state)
        return self.state

    def u32(self) -> int:
        return self.u64() >> 32

    def uniform(self) -> float:
        return (self.u64() >> 11) * (1.0 / (1 << 53))

    def randint(self, a: int, b: int) -> int:
        """Целое в [a, b] включительно."""
        if a > b:
            a, b = b, a
        span = b - a + 1
        return a + (self.u64() % span)

    def choose(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.u64() % len(seq)]

    def shuffle(self, seq: List[Any]) -> None:
        for i in range(len(seq) - 1, 0, -1):
            j = self.u64() % (i + 1)
            seq[i], seq[j] = seq[j], seq[i]
