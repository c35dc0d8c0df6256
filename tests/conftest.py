import pytest

from mimematch.logging.helpers import set_trace_enabled
from mimematch.resolution.defaults import set_default_resolver


@pytest.fixture(autouse=True)
def _reset_process_state():
    yield
    set_default_resolver(None)
    set_trace_enabled(None)
