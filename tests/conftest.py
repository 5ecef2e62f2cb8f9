import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    # the CLI callback reconfigures structlog against the runner's streams
    yield
    structlog.reset_defaults()
