import pytest
from fuzzyMathPy.config import configure_parameters
from fuzzyMathPy.types import Interval, FuzzyNumber
from fuzzyMathPy import arithmetic


@pytest.fixture(autouse=True)
def default_configuration():
    """Every test starts and ends with the default configuration."""
    configure_parameters.reset_to_defaults()
    yield configure_parameters
    configure_parameters.reset_to_defaults()

@pytest.fixture
def operation_registry():
    """Restores the operation registry after tests that register custom operations."""
    saved = dict(arithmetic.OPERATION_REGISTRY)
    yield arithmetic.OPERATION_REGISTRY
    arithmetic.OPERATION_REGISTRY.clear()
    arithmetic.OPERATION_REGISTRY.update(saved)

@pytest.fixture
def triangular() -> FuzzyNumber:
    return FuzzyNumber(1, 2, 3)

@pytest.fixture
def trapezoidal() -> FuzzyNumber:
    return FuzzyNumber(1, 2, 3, 5)

@pytest.fixture
def piecewise() -> FuzzyNumber:
    """Three alpha-cuts with a kink at alpha = 0.5."""
    return FuzzyNumber([Interval(-1, 6), Interval(0, 4), Interval(2, 3)])
