import pytest

from calcfixtures.calculator import Calculator


@pytest.fixture
def calc():
    """Provide a fresh Calculator."""
    return Calculator()
