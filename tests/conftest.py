"""Shared test fixtures for the FSMActions test suite."""

import pytest

from fsmactions import err, set_debug_options, set_output


@pytest.fixture(autouse=True)
def _reset_diagnostics():
    """Give every test a quiet, empty error sink and default debug settings."""
    err.clear()
    err.set_handler(lambda message: None)
    set_debug_options(level=0, include_all=False, include=None)
    set_output(None)
    yield
    err.clear()
    err.set_handler(None)
    set_debug_options(level=0, include_all=False, include=None)
    set_output(None)


@pytest.fixture
def output():
    """Capture the diagnostic output channel as a list of lines."""
    lines: list[str] = []
    set_output(lines.append)
    return lines
