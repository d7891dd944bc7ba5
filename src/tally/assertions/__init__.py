"""Assertion results recorded by the tracker."""

from .result import AssertionResult

__all__ = ["AssertionResult"]
