from __future__ import annotations

import inspect
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import FrameType
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from tally.assertions.result import AssertionResult

logger = logging.getLogger(__name__)

UNKNOWN_TEST_NAME = "<unknown>"

TEST_CONTEXT: ContextVar[TestContext | None] = ContextVar("test_context", default=None)


@dataclass(frozen=True, slots=True)
class TestContext:
    """Execution context for a single named test.

    Attributes
    ----------
    test_item_name
        Name that recorded assertions are attributed to.
    collected_assertion_results
        Assertion results recorded while this context was active.
    """

    __test__ = False

    test_item_name: str | None = None
    collected_assertion_results: list[AssertionResult] = field(default_factory=list)


@contextmanager
def test_context_scope(ctx: TestContext) -> Iterator[TestContext]:
    token = TEST_CONTEXT.set(ctx)
    try:
        yield ctx
    finally:
        TEST_CONTEXT.reset(token)


def _is_tally_frame(frame: FrameType) -> bool:
    module_name = frame.f_globals.get("__name__", "")
    return module_name == "tally" or module_name.startswith("tally.")


def resolve_test_name() -> str:
    """Return the name of the test the current assertion belongs to.

    An active TestContext with a name wins. Otherwise the stack is walked
    outward to the first function that lives outside the tally package.
    """
    ctx = TEST_CONTEXT.get()
    if ctx is not None and ctx.test_item_name:
        return ctx.test_item_name

    frame = inspect.currentframe()
    if frame is None:
        logger.warning("No frame found for test name resolution")
        return UNKNOWN_TEST_NAME

    try:
        frame = frame.f_back
        while frame:
            if not _is_tally_frame(frame):
                return frame.f_code.co_name
            frame = frame.f_back
    finally:
        del frame

    logger.warning("No caller outside tally found for test name resolution")
    return UNKNOWN_TEST_NAME

