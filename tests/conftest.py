import pytest

from styledstr import _settings


@pytest.fixture(scope="function", autouse=True)
def options():
    """Restore capability flags after each test."""
    original_options = dict(_settings.options)
    yield _settings.options
    _settings.options.update(original_options)  # type: ignore
