from tinct import Color


def test_packed_byte_orders(sample_color):
    assert sample_color.to_rgba32() == 0x336699cc
    assert sample_color.to_argb32() == 0xcc336699
    assert sample_color.to_abgr32() == 0xcc996633

def test_packed_primaries():
    red = Color(1.0, 0.0, 0.0, 1.0)
    assert red.to_argb32() == 0xffff0000
    assert red.to_abgr32() == 0xff0000ff
    assert red.to_rgba32() == 0xff0000ff

def test_packing_truncates():
    c = Color(0.5, 0.999, 0.0, 1.0)
    assert c.to_rgba32() == 0x7ffe00ff

def test_hex_decodes_rgba_layout():
    c = Color.hex(0xff800040)
    assert c == Color(1.0, 128 / 255, 0.0, 64 / 255)

def test_hex_inverts_to_rgba32(sample_color):
    assert Color.hex(sample_color.to_rgba32()).is_equal_approx(sample_color, atol=1 / 255)

def test_hex_does_not_invert_argb32(sample_color):
    assert not Color.hex(sample_color.to_argb32()).is_equal_approx(sample_color, atol=1 / 255)

def test_packed_64(sample_color):
    red = Color(1.0, 0.0, 0.0, 1.0)
    assert red.to_rgba64() == 0xffff00000000ffff
    assert red.to_argb64() == 0xffffffff00000000
    assert red.to_abgr64() == 0xffff00000000ffff
    assert Color.hex64(0xffff00000000ffff) == red
    assert Color.hex64(sample_color.to_rgba64()).is_equal_approx(sample_color, atol=1 / 65535)

def test_named_through_packed():
    assert Color.named("dark blue").to_argb32() == 0xff00008b
