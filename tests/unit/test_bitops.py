import numpy as np
import pytest

from hamlink.utils.bitops import as_bits, pack, unpack


def test_unpack_is_msb_first():
    bits = unpack(b"\xA5\x01")
    assert bits.dtype == np.uint8
    assert bits.tolist() == [1, 0, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1]


def test_unpack_empty():
    assert unpack(b"").size == 0
    assert pack([], pad=True) == b""
    assert pack([], pad=False) == b""


def test_bytes_roundtrip_all_values():
    data = bytes(range(256))
    assert len(unpack(data)) == 8 * len(data)
    assert pack(unpack(data), pad=False) == data
    assert pack(unpack(data), pad=True) == data


def test_pack_pad_appends_zero_bits():
    # 101 -> 1010_0000
    assert pack([1, 0, 1], pad=True) == b"\xA0"
    # 9 bits -> 2 bytes
    assert pack([1] * 9, pad=True) == b"\xFF\x80"


def test_pack_without_pad_drops_partial_byte():
    assert pack([1, 0, 1], pad=False) == b""
    assert pack([1] * 8 + [1, 1, 1], pad=False) == b"\xFF"


def test_as_bits_masks_to_lsb():
    assert as_bits([0, 1, 2, 3]).tolist() == [0, 1, 0, 1]


def test_unpack_rejects_non_bytes():
    with pytest.raises(TypeError):
        unpack("not bytes")  # type: ignore[arg-type]
