"""Shared types for tally."""

from enum import Enum


class Outcome(Enum):
    """Outcome of a single recorded assertion."""

    PASSED = "passed"
    FAILED = "failed"
