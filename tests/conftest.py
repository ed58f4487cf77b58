import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo ``configure_logging`` so no test logs into another test's captured stream."""
    yield
    structlog.reset_defaults()
