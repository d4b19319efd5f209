"""Recorded outcomes of test step executions."""

from enum import StrEnum

from pydantic import Field

from reportview.domain.report.model.base import MessageValue


class TestStepResultStatus(StrEnum):
    __test__ = False  # keep pytest from collecting it

    UNKNOWN = "UNKNOWN"
    PASSED = "PASSED"
    SKIPPED = "SKIPPED"
    PENDING = "PENDING"
    UNDEFINED = "UNDEFINED"
    AMBIGUOUS = "AMBIGUOUS"
    FAILED = "FAILED"


class Duration(MessageValue):
    """Elapsed time split into whole seconds and nanoseconds."""

    seconds: int = Field(default=0, ge=0)
    nanos: int = Field(default=0, ge=0)

    @property
    def total_seconds(self) -> float:
        return self.seconds + self.nanos / 1_000_000_000


class ExecutionResult(MessageValue):
    """One outcome of running a step. A retried step records several."""

    status: TestStepResultStatus
    message: str | None = None
    duration: Duration
