"""Tally error types."""


class TallyError(Exception):
    """Base class for tally errors."""


class TallyConfigError(TallyError):
    """Raised when tally configuration cannot be loaded."""

    def __init__(self, variable: str, value: str, cause: Exception | None = None) -> None:
        self.variable = variable
        self.value = value
        self.cause = cause

        message = f"Invalid value for {variable}: {value!r}"
        if cause:
            message += f"\nCause: {cause}"

        super().__init__(message)
