# tests/conftest.py
import pytest
from unitfold.core.dimensions import CURRENT, LENGTH, MASS, TIME
from unitfold.core.unit import BaseUnit
from unitfold.units.registry import DEFAULT_REGISTRY as _ureg
from unitfold.units.registry import _bootstrap_default_registry


@pytest.fixture(scope="session")
def ureg():
    return _ureg

@pytest.fixture()
def reg():
    """Fresh, fully-bootstrapped UnitsRegistry for isolation per test."""
    return _bootstrap_default_registry()

@pytest.fixture()
def m():
    return BaseUnit("m", 1.0, LENGTH)

@pytest.fixture()
def s():
    return BaseUnit("s", 1.0, TIME)

@pytest.fixture()
def kg():
    return BaseUnit("kg", 1.0, MASS)

@pytest.fixture()
def A():
    return BaseUnit("A", 1.0, CURRENT)
