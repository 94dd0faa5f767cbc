from __future__ import annotations

from typing import Sequence, Union

import numpy as np

BitsLike = Union[np.ndarray, Sequence[int]]


def as_bits(bits: BitsLike) -> np.ndarray:
    """
    Normalize a bit sequence to a flat uint8 array of 0/1 values.
    """
    return (np.asarray(bits, dtype=np.uint8).reshape(-1) & 1).astype(np.uint8)


def unpack(data: bytes) -> np.ndarray:
    """
    Expand bytes into bits, MSB-first per byte (bit7, bit6, ..., bit0).

    len(result) == 8 * len(data)
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("unpack: data must be bytes-like")
    if len(data) == 0:
        return np.zeros((0,), dtype=np.uint8)
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.unpackbits(arr)


def pack(bits: BitsLike, *, pad: bool) -> bytes:
    """
    Pack bits into bytes MSB-first.

    pad=True:  append zero bits up to the next byte boundary first.
    pad=False: trailing bits that do not complete a byte are DROPPED.
               Lossy; only use when the caller already guarantees alignment
               (or wants the remainder discarded, as the decoder does).
    """
    b = as_bits(bits)
    if pad:
        extra = (-b.size) % 8
        if extra:
            b = np.concatenate([b, np.zeros(extra, dtype=np.uint8)])
    else:
        b = b[: (b.size // 8) * 8]

    if b.size == 0:
        return b""
    return np.packbits(b).tobytes()
