import pytest


@pytest.fixture
def sine_table():
    # sin(x) in degrees, rounded to five places
    return [(0.0, 0.0), (30.0, 0.5), (60.0, 0.86603), (90.0, 1.0)]


@pytest.fixture
def linear_table():
    return [(0.0, 0.0), (1.0, 2.0)]


@pytest.fixture
def cubic():
    def p(x):
        return 2.0 * x ** 3 - x ** 2 + 3.0 * x - 5.0
    return p
