"""Port for reading recorded report data."""

from abc import abstractmethod
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from reportview.domain.report.model.hook import HookDescriptor
from reportview.domain.report.model.result import ExecutionResult
from reportview.domain.shared.port import Port


@runtime_checkable
class ReportQuery(Port, Protocol):
    """Read-only lookups into a test run's report data."""

    @abstractmethod
    def get_test_step_results(self, step_id: str) -> Sequence[ExecutionResult]:
        """Return every result recorded for a step, oldest first.

        Returns an empty sequence when nothing has been recorded.
        """
        ...

    @abstractmethod
    def get_hook(self, hook_id: str) -> HookDescriptor | None:
        """Return the hook definition with this id, or None if unknown."""
        ...
