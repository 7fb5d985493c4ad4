"""Commutative identity hashing for tag maps and bucket values."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

_MASK64 = (1 << 64) - 1

HASH_SEED = 23
HASH_FOLD = 31

_C1 = 0x87C37B91114253D5
_C2 = 0x4CF5AD432745937F


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK64


def _fmix(k: int) -> int:
    k ^= k >> 33
    k = (k * 0xFF51AFD7ED558CCD) & _MASK64
    k ^= k >> 33
    k = (k * 0xC4CEB9FE1A85EC53) & _MASK64
    k ^= k >> 33
    return k


def _mix_k1(k1: int) -> int:
    k1 = (k1 * _C1) & _MASK64
    k1 = _rotl(k1, 31)
    return (k1 * _C2) & _MASK64


def _mix_k2(k2: int) -> int:
    k2 = (k2 * _C2) & _MASK64
    k2 = _rotl(k2, 33)
    return (k2 * _C1) & _MASK64


def murmur3_sum64(data: bytes | str) -> int:
    """Return the first 64 bits of the x64 128-bit MurmurHash3 of data, seed 0."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    length = len(data)
    h1 = h2 = 0

    block_end = length - length % 16
    for k1, k2 in struct.iter_unpack("<QQ", data[:block_end]):
        h1 ^= _mix_k1(k1)
        h1 = _rotl(h1, 27)
        h1 = (h1 + h2) & _MASK64
        h1 = (h1 * 5 + 0x52DCE729) & _MASK64

        h2 ^= _mix_k2(k2)
        h2 = _rotl(h2, 31)
        h2 = (h2 + h1) & _MASK64
        h2 = (h2 * 5 + 0x38495AB5) & _MASK64

    tail = data[block_end:]
    if len(tail) > 8:
        h2 ^= _mix_k2(int.from_bytes(tail[8:], "little"))
    if tail:
        h1 ^= _mix_k1(int.from_bytes(tail[:8], "little"))

    h1 ^= length
    h2 ^= length
    h1 = (h1 + h2) & _MASK64
    h2 = (h2 + h1) & _MASK64
    h1 = _fmix(h1)
    h2 = _fmix(h2)
    h1 = (h1 + h2) & _MASK64
    return h1


@dataclass(frozen=True)
class Accumulator:
    """A commutative folding accumulator over unsigned 64-bit values."""

    value: int = HASH_SEED

    def add_string(self, s: str) -> Accumulator:
        """Hash s and fold it into a new accumulator."""
        return self.add_uint64(murmur3_sum64(s))

    def add_uint64(self, u64: int) -> Accumulator:
        """Fold u64 into a new accumulator, wrapping at 64 bits."""
        folded = ((u64 & _MASK64) * HASH_FOLD) & _MASK64
        return Accumulator((self.value + folded) & _MASK64)


def _fold_uint64s(values: Iterable[int]) -> int:
    acc = Accumulator()
    for v in values:
        acc = acc.add_uint64(v)
    return acc.value


def durations(durs: Iterable[int]) -> int:
    """Return the accumulated identity of durations given in nanoseconds."""
    durs = list(durs)
    return _fold_uint64s(durs) if durs else 0


def int64s(values: Iterable[int]) -> int:
    """Return the accumulated identity of signed 64-bit integers."""
    values = list(values)
    return _fold_uint64s(values) if values else 0


def float64s(values: Iterable[float]) -> int:
    """Return the accumulated identity of floats, folded by their IEEE-754 bits."""
    values = list(values)
    if not values:
        return 0
    return _fold_uint64s(struct.unpack("<Q", struct.pack("<d", f))[0] for f in values)


def string_string_map(m: Mapping[str, str]) -> int:
    """Return the order-independent identity of a string-to-string mapping."""
    if not m:
        return 0
    acc = Accumulator()
    for k, v in m.items():
        acc = acc.add_string(f"{k}={v}")
    return acc.value