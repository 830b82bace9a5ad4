import warnings

import numpy as np
import pytest

from tinct import Color


def test_addition():
    result = Color(0.2, 0.3, 0.4, 0.5) + Color(0.5, 0.4, 0.3, 0.2)
    assert isinstance(result, Color)
    assert np.allclose(result.value, (0.7, 0.7, 0.7, 0.7))

def test_addition_does_not_clamp():
    result = Color(0.8, 0.9, 1.0, 1.0) + Color(0.5, 0.4, 0.3, 1.0)
    assert np.allclose(result.value, (1.3, 1.3, 1.3, 2.0))

def test_subtraction_does_not_clamp():
    result = Color(0.6, 0.7, 0.8, 1.0) - Color(0.5, 0.6, 0.9, 0.25)
    assert np.allclose(result.value, (0.1, 0.1, -0.1, 0.75))

def test_componentwise_multiplication():
    result = Color(0.4, 0.6, 0.8, 1.0) * Color(0.5, 0.5, 0.25, 0.5)
    assert np.allclose(result.value, (0.2, 0.3, 0.2, 0.5))

def test_scalar_multiplication_both_sides():
    c = Color(0.4, 0.6, 0.8, 1.0)
    assert np.allclose((c * 0.5).value, (0.2, 0.3, 0.4, 0.5))
    assert np.allclose((0.5 * c).value, (0.2, 0.3, 0.4, 0.5))
    assert np.allclose((c * 2).value, (0.8, 1.2, 1.6, 2.0))
    assert np.allclose((np.float32(0.5) * c).value, (0.2, 0.3, 0.4, 0.5))

def test_componentwise_division():
    result = Color(0.4, 0.6, 0.8, 1.0) / Color(2.0, 3.0, 4.0, 0.5)
    assert np.allclose(result.value, (0.2, 0.2, 0.2, 2.0))

def test_scalar_division():
    result = Color(0.4, 0.6, 0.8, 1.0) / 2
    assert np.allclose(result.value, (0.2, 0.3, 0.4, 0.5))

def test_scalar_division_by_zero_gives_white():
    for dividend in (Color(0.3, 0.6, 0.9, 0.5), Color(0.0, 0.0, 0.0, 0.0), Color(-2.0, 5.0, 0.1, 1.0)):
        assert dividend / 0 == Color(1.0, 1.0, 1.0, 1.0)
        assert dividend / 0.0 == Color(1.0, 1.0, 1.0, 1.0)

def test_inplace_scalar_division_by_zero_gives_white():
    c = Color(0.3, 0.6, 0.9, 0.5)
    c /= 0
    assert c == Color(1.0, 1.0, 1.0, 1.0)

def test_componentwise_division_by_zero_channel():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = Color(0.5, 0.0, 0.5, 1.0) / Color(0.0, 0.0, 1.0, 1.0)
    assert np.isinf(result.r)
    assert np.isnan(result.g)
    assert result.b == 0.5

def test_inplace_operators_mutate():
    c = Color(0.2, 0.2, 0.2, 0.2)
    alias = c
    c += Color(0.1, 0.1, 0.1, 0.1)
    assert c is alias
    assert np.allclose(alias.value, (0.3, 0.3, 0.3, 0.3))
    c -= Color(0.1, 0.1, 0.1, 0.1)
    assert np.allclose(alias.value, (0.2, 0.2, 0.2, 0.2))
    c *= 2
    assert np.allclose(alias.value, (0.4, 0.4, 0.4, 0.4))
    c *= Color(0.5, 1.0, 1.0, 0.0)
    assert np.allclose(alias.value, (0.2, 0.4, 0.4, 0.0))
    c /= 4
    assert np.allclose(alias.value, (0.05, 0.1, 0.1, 0.0))
    c /= Color(0.5, 0.5, 0.5, 1.0)
    assert np.allclose(alias.value, (0.1, 0.2, 0.2, 0.0))
    assert c is alias

def test_negation_includes_alpha():
    c = Color(0.2, 0.4, 0.6, 0.25)
    assert np.allclose((-c).value, (0.8, 0.6, 0.4, 0.75))

def test_negation_differs_from_inverted_on_alpha():
    c = Color(0.2, 0.4, 0.6, 0.25)
    assert (-c).a == 0.75
    assert c.inverted().a == 0.25
    assert -c != c.inverted()

def test_invert_operator():
    c = Color(0.2, 0.4, 0.6, 0.25)
    assert ~c == c.inverted()

def test_operators_return_new_colors():
    c = Color(0.2, 0.4, 0.6, 0.8)
    for result in (c + c, c - c, c * c, c * 2, c / 2, -c):
        assert result is not c
    assert np.allclose(c.value, (0.2, 0.4, 0.6, 0.8))

def test_unsupported_operands():
    c = Color()
    with pytest.raises(TypeError):
        c + 1
    with pytest.raises(TypeError):
        1 - c
    with pytest.raises(TypeError):
        c * "2"
    with pytest.raises(TypeError):
        2 / c
    with pytest.raises(TypeError):
        c += 0.5
