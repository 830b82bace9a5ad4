from tinct.conversions.html import expand_html, format_html, parse_html
from ..samples import samples_html, invalid_html


def test_expand_html():
    assert expand_html("#f80") == "ff8800"
    assert expand_html("f80c") == "ff8800cc"
    assert expand_html("#ff8800") == "ff8800"
    assert expand_html("##f80") == "#f80"

def test_parse_html_samples():
    for code, expected in samples_html.items():
        parsed = parse_html(code)
        assert parsed is not None, code
        assert parsed == tuple(v / 255 for v in expected), code

def test_parse_html_rejects_invalid():
    for code in invalid_html:
        assert parse_html(code) is None, code

def test_format_html_rounds_and_clamps():
    assert format_html([1.0, 0.0, 0.0, 1.0]) == "ffff0000"
    assert format_html([1.0, 0.0, 0.0, 1.0], with_alpha=False) == "ff0000"
    # 0.5 * 255 = 127.5 rounds half away from zero
    assert format_html([0.5, 0.5, 0.5, 0.5]) == "80808080"
    assert format_html([2.0, -1.0, 0.2, 1.0], with_alpha=False) == "ff0033"
