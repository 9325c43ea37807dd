import pytest

from snarfui import reset_config, set_scheduler


@pytest.fixture(autouse=True)
def _clean_globals():
    """Config and scheduler are process-wide; give every test a fresh pair."""
    reset_config()
    set_scheduler(None)
    yield
    reset_config()
    set_scheduler(None)
