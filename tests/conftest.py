import pytest

from symcalc import var, config_context


@pytest.fixture(autouse=True)
def isolated_config():
    """Every test runs with the default configuration, whatever it changes"""
    with config_context():
        yield


@pytest.fixture
def x():
    return var('x')


@pytest.fixture
def y():
    return var('y')
