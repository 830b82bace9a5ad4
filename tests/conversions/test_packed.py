import numpy as np
import pytest

from tinct.conversions.packed import pack32, pack64, unpack32, unpack64


CHANNELS = np.array([0.2, 0.4, 0.6, 0.8], dtype=np.float32)

def test_pack32_byte_orders():
    assert pack32(CHANNELS, "rgba") == 0x336699cc
    assert pack32(CHANNELS, "argb") == 0xcc336699
    assert pack32(CHANNELS, "abgr") == 0xcc996633

def test_pack32_truncates():
    # 0.999 * 255 = 254.745 -> 254, 0.5 * 255 = 127.5 -> 127
    assert pack32([0.999, 0.5, 0.0, 1.0], "rgba") == 0xfe7f00ff

def test_pack64():
    assert pack64([1.0, 0.0, 0.5, 1.0], "rgba") == 0xffff00007fffffff
    assert pack64([1.0, 0.0, 0.5, 1.0], "argb") == 0xffffffff00007fff
    assert pack64([1.0, 0.0, 0.5, 1.0], "abgr") == 0xffff7fff0000ffff

def test_invalid_byte_order():
    with pytest.raises(ValueError):
        pack32(CHANNELS, "rgbb")  # type: ignore[arg-type]

def test_unpack32():
    r, g, b, a = unpack32(0x336699cc)
    assert (r, g, b, a) == (0x33 / 255, 0x66 / 255, 0x99 / 255, 0xcc / 255)

def test_unpack32_ignores_high_bits():
    assert unpack32(0x1_ff0000ff) == unpack32(0xff0000ff)

def test_unpack64():
    assert unpack64(0xffff00007fffffff) == (1.0, 0.0, 0x7fff / 65535, 1.0)
