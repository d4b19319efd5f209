"""Pick the result that decides a step's status."""

from collections.abc import Sequence

from reportview.domain.report.model.result import ExecutionResult, TestStepResultStatus


def select_result(results: Sequence[ExecutionResult]) -> ExecutionResult | None:
    """Return the most recent result, or None when nothing was recorded.

    Selection is positional: a later entry overrides earlier ones whatever
    their statuses are.
    """
    if not results:
        return None
    return results[-1]


def select_status(results: Sequence[ExecutionResult]) -> TestStepResultStatus | None:
    result = select_result(results)
    return result.status if result is not None else None


def is_failed(status: TestStepResultStatus | None) -> bool:
    return status == TestStepResultStatus.FAILED
