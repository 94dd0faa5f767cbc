from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from hamlink.utils.bitops import BitsLike, as_bits, pack, unpack


# Codeword index i holds Hamming position 7 - i:
#   index:    0   1   2   3   4   5   6
#   position: 7   6   5   4   3   2   1
#   content:  d7  d6  d5  p4  d3  p2  p1
CODEWORD_BITS = 7
DATA_BITS = 4

DATA_POSITIONS = (7, 6, 5, 3)
DATA_INDICES = (0, 1, 2, 4)
PARITY_INDICES = (3, 5, 6)  # p4, p2, p1


def _position_codes(positions: Sequence[int]) -> np.ndarray:
    """
    3-bit binary code of each Hamming position, MSB-first (6 -> [1, 1, 0]).
    """
    return np.array(
        [[(p >> w) & 1 for w in (2, 1, 0)] for p in positions],
        dtype=np.int64,
    )


_DATA_CODES = _position_codes(DATA_POSITIONS)
_CODEWORD_CODES = _position_codes(range(CODEWORD_BITS, 0, -1))


def _xor_codes(rows: np.ndarray, codes: np.ndarray) -> np.ndarray:
    """
    For every row, collect the position code of each bit that is 1 and XOR them
    slot by slot. An even count of ones in a slot gives 0, an odd count gives 1.

    Returns shape (n_rows, 3): slot 0 carries weight 4, slot 2 weight 1.
    """
    return (rows.astype(np.int64) @ codes) & 1


# ----------------------------
# Bit-level core
# ----------------------------

def encode_bits(bits: BitsLike) -> np.ndarray:
    """
    Encode a bit sequence into Hamming(7,4) codewords.

    The input is zero-padded to a multiple of 4, then each group (d7, d6, d5, d3)
    becomes d7 d6 d5 p4 d3 p2 p1 with
      p4 = d5 ^ d6 ^ d7
      p2 = d3 ^ d6 ^ d7
      p1 = d3 ^ d5 ^ d7

    len(result) == 7 * ceil(len(bits) / 4)
    """
    b = as_bits(bits)
    pad = (-b.size) % DATA_BITS
    if pad:
        b = np.concatenate([b, np.zeros(pad, dtype=np.uint8)])

    groups = b.reshape(-1, DATA_BITS)
    parity = _xor_codes(groups, _DATA_CODES)

    cw = np.zeros((groups.shape[0], CODEWORD_BITS), dtype=np.uint8)
    cw[:, DATA_INDICES] = groups
    cw[:, PARITY_INDICES] = parity
    return cw.reshape(-1)


def syndromes(bits: BitsLike) -> np.ndarray:
    """
    Per-codeword syndrome (0..7) over the whole-codeword prefix of bits.
    0 means all parity checks pass; otherwise it is the Hamming position to flip.
    """
    c = as_bits(bits)
    n_full = (c.size // CODEWORD_BITS) * CODEWORD_BITS
    cw = c[:n_full].reshape(-1, CODEWORD_BITS)
    return _syndromes_of(cw)


def _syndromes_of(cw: np.ndarray) -> np.ndarray:
    s = _xor_codes(cw, _CODEWORD_CODES)
    return (s[:, 0] << 2) | (s[:, 1] << 1) | s[:, 2]


def decode_bits(bits: BitsLike) -> np.ndarray:
    """
    Correct up to one flipped bit per codeword and extract the data bits.

    Only the largest prefix whose length is a multiple of 7 is decoded; any
    remainder is discarded. Two or more flips in one codeword can be
    miscorrected, that is a limit of the code and not reported.

    len(result) == 4 * (len(bits) // 7)
    """
    c = as_bits(bits)
    n_full = (c.size // CODEWORD_BITS) * CODEWORD_BITS
    cw = c[:n_full].reshape(-1, CODEWORD_BITS).copy()

    s = _syndromes_of(cw)
    bad = np.nonzero(s)[0]
    if bad.size:
        # syndrome names the Hamming position; position p lives at index 7 - p
        cw[bad, CODEWORD_BITS - s[bad]] ^= 1

    return cw[:, DATA_INDICES].reshape(-1)


# ----------------------------
# Normalized module surface
# ----------------------------

@dataclass(frozen=True)
class Config:
    """
    Bit-level Hamming(7,4) single-error-correcting FEC.

    Input/Output of tx/rx are BYTES, interpreted as a packed bitstream.

    Bit order:
      - bytes are expanded MSB-first: bit7, bit6, ..., bit0
      - codewords are emitted in position order 7..1 and packed MSB-first

    pad:
      - if True, tx zero-pads the codeword stream to a byte boundary
      - if False, tx drops a trailing partial byte (lossy unless the
        codeword bit count is already a multiple of 8)

    rx never pads: it decodes whole codewords and drops any bits that do not
    fill an output byte.
    """
    pad: bool = True


def tx(data: bytes, *, cfg: Any) -> bytes:
    """
    Encode packed bits (from data bytes) into packed codeword bits (bytes).
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")

    return pack_codewords(encode_bits(unpack(bytes(data))), cfg=cfg)


def pack_codewords(bits: BitsLike, *, cfg: Any) -> bytes:
    """
    Pack an encoded codeword stream the way tx does (honours cfg.pad).
    """
    return pack(bits, pad=_get_pad(cfg))


def rx(data: bytes, *, cfg: Any) -> bytes:
    """
    Decode packed codeword bits (bytes) back into packed original bits (bytes).
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")

    _get_pad(cfg)
    return pack(decode_bits(unpack(bytes(data))), pad=False)


def _get_pad(cfg: Any) -> bool:
    pad = getattr(cfg, "pad", None)
    if pad is None:
        raise AttributeError("cfg missing required attribute: pad")
    if not isinstance(pad, bool):
        raise TypeError("cfg.pad must be bool")
    return pad
