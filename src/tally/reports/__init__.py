"""Reporting module for tally console output."""

from tally.reports.console import ConsoleFormatter, make_console

__all__ = ["ConsoleFormatter", "make_console"]
