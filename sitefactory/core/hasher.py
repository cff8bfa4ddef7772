"""Deterministic string hashing for reproducible per-business selection.

Both hashes operate on UTF-16 code units with 32-bit wraparound so that a
business name maps to the same index no matter which process computes it.
Neither is salted; never replace them with ``hash()``.
"""

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")

_MASK = 0xFFFFFFFF


def _code_units(seed: str) -> Iterator[int]:
    data = seed.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def _to_int32(value: int) -> int:
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


def stable_hash(seed: str) -> int:
    """Polynomial rolling hash (base 31). Empty seed hashes to 0."""
    h = 0
    for unit in _code_units(seed or ""):
        h = (31 * h + unit) & _MASK
    return abs(_to_int32(h))


def spread_hash(seed: str) -> int:
    """Two-lane multiply/rotate mixer.

    Spreads near-identical seeds ("Salon Anna" / "Salon Anne") further apart
    than the polynomial hash does; used for palette choice.
    """
    h1, h2 = 0x9E3779B9, 0x6C62272E
    for unit in _code_units(seed or ""):
        h1 = ((h1 ^ unit) * 0x9E3779B9) & _MASK
        h2 = ((h2 ^ unit) * 0x517CC1B7) & _MASK
        h1 = ((h1 << 13) | (h1 >> 19)) & _MASK
        h2 = ((h2 << 7) | (h2 >> 25)) & _MASK
    return abs(_to_int32(h1 ^ h2))


def pick(pool: Sequence[T], seed: str) -> T:
    """Select ``pool[stable_hash(seed) % len(pool)]``; pool must be non-empty."""
    return pool[stable_hash(seed) % len(pool)]
