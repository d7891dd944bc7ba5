from .context import (
    TEST_CONTEXT,
    UNKNOWN_TEST_NAME,
    TestContext,
    resolve_test_name,
    test_context_scope,
)

__all__ = [
    "TestContext",
    "TEST_CONTEXT",
    "UNKNOWN_TEST_NAME",
    "resolve_test_name",
    "test_context_scope",
]
