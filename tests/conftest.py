import pytest
import numpy.random
from pyset import ConcurrencyMode


@pytest.fixture(params=list(ConcurrencyMode), ids=lambda mode: mode.name.lower())
def mode(request):
    """Run the requesting test once per concurrency mode."""
    return request.param


def pytest_runtest_setup(item):
    """ Hook function which is called before every test """
    # Fix the seed so randomized workloads are reproducible
    numpy.random.seed(21)
