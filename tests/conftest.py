import pytest

from tinct import Color


@pytest.fixture
def sample_color():
    """A color with four distinct channels, none at 0 or 1."""
    return Color(0.2, 0.4, 0.6, 0.8)
