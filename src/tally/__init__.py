"""Tally - pass/fail assertion tracking for hand-rolled unit tests."""

from .assertions import AssertionResult
from .config import TallyConfig, load_config
from .context import TestContext, resolve_test_name, test_context_scope
from .errors import TallyConfigError, TallyError
from .tracker import AssertionTracker, SessionSummary
from .types import Outcome
from .version import __version__


__all__ = [
    # Core
    "AssertionTracker",
    "SessionSummary",
    "AssertionResult",
    "Outcome",
    # Context
    "TestContext",
    "resolve_test_name",
    "test_context_scope",
    # Config
    "TallyConfig",
    "load_config",
    # Errors
    "TallyError",
    "TallyConfigError",
    "__version__",
]
