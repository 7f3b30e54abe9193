import pytest

from tests.helpers import Customer


@pytest.fixture
def customers():
    return [
        Customer(1, "Hermann Maier"),
        Customer(4, "Markus Stahl"),
        Customer(8, "Jochen Busser"),
    ]


@pytest.fixture
def doubles():
    return [1.0, 2.0, 3.0]
