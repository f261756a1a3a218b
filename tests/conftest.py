import pytest

from tests.helpers import BASELINE


@pytest.fixture
def baseline_inputs():
    return BASELINE
