from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from hamlink.utils.bitops import BitsLike, as_bits, pack, unpack


@dataclass(frozen=True)
class Config:
    """
    Single-bit-per-codeword noise, the error model Hamming(7,4) can fully repair.

    For each whole codeword of `block` bits:
      - draw r = randint(0, block - 1)
      - if r == sentinel, draw pos = randint(0, block - 1) and flip bit pos

    So every codeword independently gets exactly one flipped bit with
    probability 1/block, at a uniformly random position (parity bits included).
    Trailing bits beyond the last whole codeword pass through untouched.

    seed: None -> time-based seed taken on first use, never reseeded.

    This is NOT deterministic unless seeded, and not idempotent.
    """
    block: int = 7
    sentinel: int = 4
    seed: Optional[int] = None


class Injector:
    """
    Owns the random source. Built once and reused so the generator state
    carries across calls; draws are serialized so one injector can be shared
    between threads.
    """

    def __init__(self, cfg: Any = None, rng: Optional[random.Random] = None):
        self.cfg = cfg if cfg is not None else Config()
        self._block, self._sentinel = _get_block_and_sentinel(self.cfg)
        self._seed = _get_seed(self.cfg)
        self._rng = rng
        self._lock = threading.Lock()

    @property
    def rng(self) -> random.Random:
        if self._rng is None:
            seed = self._seed if self._seed is not None else time.time_ns()
            self._rng = random.Random(seed)
        return self._rng

    def inject(self, bits: BitsLike) -> np.ndarray:
        """
        Return a copy of bits with at most one bit flipped per whole codeword.
        """
        out = as_bits(bits).copy()
        n = self._block
        n_words = out.size // n

        with self._lock:
            rng = self.rng
            for w in range(n_words):
                if rng.randint(0, n - 1) == self._sentinel:
                    pos = w * n + rng.randint(0, n - 1)
                    out[pos] ^= 1

        return out


def tx(data: bytes, *, cfg: Any, injector: Optional[Injector] = None) -> bytes:
    """
    Apply channel noise to packed codeword bits (bytes).

    Without an explicit injector, the process-wide injector for cfg is used, so
    repeated calls continue one random stream instead of reseeding.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")

    inj = injector if injector is not None else shared_injector(cfg)
    return pack(inj.inject(unpack(bytes(data))), pad=True)


_shared: dict = {}
_shared_lock = threading.Lock()


def shared_injector(cfg: Any) -> Injector:
    """
    Injector built once per distinct cfg and kept for the process lifetime.
    """
    with _shared_lock:
        inj = _shared.get(cfg)
        if inj is None:
            inj = Injector(cfg)
            _shared[cfg] = inj
        return inj


# ----------------------------
# Internal
# ----------------------------

def _get_block_and_sentinel(cfg: Any) -> tuple[int, int]:
    block = getattr(cfg, "block", None)
    sentinel = getattr(cfg, "sentinel", None)

    for name, v in (("block", block), ("sentinel", sentinel)):
        if v is None:
            raise AttributeError(f"cfg missing required attribute: {name}")
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"cfg.{name} must be int")

    if block < 1:
        raise ValueError("cfg.block must be >= 1")
    if not (0 <= sentinel < block):
        raise ValueError(f"cfg.sentinel must be in [0, {block - 1}]")
    return block, sentinel


def _get_seed(cfg: Any) -> Optional[int]:
    seed = getattr(cfg, "seed", None)
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        raise TypeError("cfg.seed must be int or None")
    return seed
