"""Result record for a single evaluated assertion."""

from pydantic import BaseModel, ConfigDict

from tally.types import Outcome


class AssertionResult(BaseModel):
    """Result of evaluating one assertion against a tracker.

    Attributes:
    ----------
    test_name: str
        Name of the test the assertion was attributed to
    outcome: Outcome
        Whether the assertion passed or failed
    message: str | None
        Failure reason, None for passing assertions
    """

    model_config = ConfigDict(frozen=True)

    test_name: str
    outcome: Outcome
    message: str | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED

    def __bool__(self) -> bool:
        return self.passed
