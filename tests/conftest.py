import pytest

import objv


@pytest.fixture(autouse=True)
def kernel():
    """Freshly bootstrapped kernel for every test."""
    objv.teardown()
    sequencer = objv.bootstrap()
    yield sequencer
    objv.teardown()
