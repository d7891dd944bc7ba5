"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from tally import AssertionTracker


@pytest.fixture
def output() -> io.StringIO:
    """Buffer the test console writes into."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Colorless console writing into the output buffer."""
    return Console(file=output, color_system=None, highlight=False)


@pytest.fixture
def color_console(output: io.StringIO) -> Console:
    """Console that always emits standard ANSI colors into the output buffer."""
    return Console(file=output, force_terminal=True, color_system="standard", highlight=False)


@pytest.fixture
def tracker(console: Console) -> AssertionTracker:
    """Quiet, plain tracker."""
    return AssertionTracker(console=console)


@pytest.fixture
def verbose_tracker(console: Console) -> AssertionTracker:
    """Verbose, plain tracker."""
    return AssertionTracker(verbose=True, console=console)
