import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    # The app module configures an INFO filter at import; tests inspect debug events.
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
