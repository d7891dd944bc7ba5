"""Assertion tracker: counts, prints and attributes unit-test assertions."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from tally.assertions.result import AssertionResult
from tally.config import TallyConfig
from tally.context import TEST_CONTEXT, TestContext, resolve_test_name, test_context_scope
from tally.reports.console import ConsoleFormatter, make_console
from tally.types import Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Snapshot of a tracker's counters.

    Trackers never share state, so results from several trackers are
    combined explicitly with ``merge`` or ``+``.
    """

    passed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    def __add__(self, other: SessionSummary) -> SessionSummary:
        if not isinstance(other, SessionSummary):
            return NotImplemented
        return SessionSummary(passed=self.passed + other.passed, failed=self.failed + other.failed)

    @classmethod
    def merge(cls, *summaries: SessionSummary) -> SessionSummary:
        merged = cls()
        for summary in summaries:
            merged = merged + summary
        logger.debug("Merged %d summaries: %s", len(summaries), merged)
        return merged


def _describe(value: Any) -> str:
    """str() of a value for a failure message, tolerating broken __str__."""
    try:
        return str(value)
    except Exception as e:
        logger.warning("Could not convert %s to text: %s", type(value).__name__, e)
        return f"<unprintable {type(value).__name__} object>"


class AssertionTracker:
    """Tracks passed and failed assertions for a test session.

    Failures are printed and counted, never raised, so a test keeps going
    after a mismatch. Passing assertions are printed only when ``verbose``.

    Each recorded assertion is attributed to a test name: the name given to
    an active ``test()`` block if there is one, otherwise the function that
    called into the tracker.

    Example::

        tracker = AssertionTracker(verbose=True, fancy=True)

        def test_greeting():
            tracker.assert_equals_string(greet("Ada"), "Hello, Ada")

        test_greeting()
        tracker.print_summary()
    """

    def __init__(
        self,
        verbose: bool = False,
        fancy: bool = False,
        *,
        console: Console | None = None,
        color: bool | None = None,
    ) -> None:
        self.verbose = verbose
        self._formatter = ConsoleFormatter(
            fancy=fancy,
            console=console if console is not None else make_console(color),
        )
        self.passed = 0
        self.failed = 0
        self.reinitialize()

    @classmethod
    def from_config(cls, config: TallyConfig, *, console: Console | None = None) -> AssertionTracker:
        return cls(config.verbose, config.fancy, console=console, color=config.color)

    @property
    def fancy(self) -> bool:
        return self._formatter.fancy

    @fancy.setter
    def fancy(self, value: bool) -> None:
        self._formatter.fancy = value

    @property
    def console(self) -> Console:
        return self._formatter.console

    # -- session ---------------------------------------------------------

    def reinitialize(self) -> None:
        """(Re)initialize the session: reset passed and failed counts."""
        self.passed = 0
        self.failed = 0
        logger.debug("Tracker session reinitialized")

    def summary(self) -> SessionSummary:
        return SessionSummary(passed=self.passed, failed=self.failed)

    def summarize(self) -> str:
        """Return a one-line summary of the session so far.

        The whole line is styled as a failure when any assertion failed. The
        style is only present as escape codes when the console has color, so
        with the default auto-detection a non-terminal stdout gets plain text.
        """
        summary = self.summary()
        text = self._formatter.summary_line(summary.total, summary.passed, summary.failed)
        return self._formatter.render(text)

    def print_summary(self) -> None:
        summary = self.summary()
        self._formatter.write(
            self._formatter.summary_line(summary.total, summary.passed, summary.failed)
        )

    @contextmanager
    def test(self, name: str) -> Iterator[TestContext]:
        """Attribute every assertion recorded inside the block to ``name``.

        Yields the TestContext, whose ``collected_assertion_results`` holds
        the results recorded in the block.
        """
        with test_context_scope(TestContext(test_item_name=name)) as ctx:
            yield ctx

    # -- recording -------------------------------------------------------

    def _collect(self, result: AssertionResult) -> AssertionResult:
        ctx = TEST_CONTEXT.get()
        if ctx is not None:
            ctx.collected_assertion_results.append(result)
        return result

    def record_pass(self) -> AssertionResult:
        test_name = resolve_test_name()
        if self.verbose:
            self._formatter.write(self._formatter.pass_line(test_name))
        self.passed += 1
        return self._collect(AssertionResult(test_name=test_name, outcome=Outcome.PASSED))

    def record_fail(self, reason: str) -> AssertionResult:
        test_name = resolve_test_name()
        reason = _describe(reason)
        self._formatter.write(self._formatter.fail_line(test_name, reason))
        self.failed += 1
        return self._collect(
            AssertionResult(test_name=test_name, outcome=Outcome.FAILED, message=reason)
        )

    def pass_(self) -> AssertionResult:
        """Unconditionally pass."""
        return self.record_pass()

    def fail(self, reason: str) -> AssertionResult:
        """Unconditionally fail with ``reason``."""
        return self.record_fail(reason)

    # -- assertions ------------------------------------------------------

    def assert_true(self, result: bool, reason: str) -> AssertionResult:
        if result:
            return self.record_pass()
        return self.record_fail(reason)

    def assert_false(self, result: bool, reason: str) -> AssertionResult:
        if not result:
            return self.record_pass()
        return self.record_fail(reason)

    def assert_null(self, actual: Any) -> AssertionResult:
        if actual is None:
            return self.record_pass()
        return self.record_fail(f"expected NULL, got <<{_describe(actual)}>>")

    def assert_equals_string(self, actual: str, expected: str) -> AssertionResult:
        if actual == expected:
            return self.record_pass()
        return self.record_fail(f'expected "{expected}" got "{actual}"')

    def assert_equals_value(self, actual: Any, expected: Any) -> AssertionResult:
        if actual == expected:
            return self.record_pass()
        return self.record_fail(f"expected <<{_describe(expected)}>> got <<{_describe(actual)}>>")

    def assert_equals_number(self, actual: float, expected: float) -> AssertionResult:
        if actual == expected:
            return self.record_pass()
        return self.record_fail(f"expected {expected} got {actual}")
