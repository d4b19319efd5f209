"""Tests for picking the status-deciding result of a step."""

import pytest

from reportview.domain.report.model import Duration, ExecutionResult, TestStepResultStatus
from reportview.domain.report.service.result_selector import (
    is_failed,
    select_result,
    select_status,
)


def _make_result(status: TestStepResultStatus, message: str | None = None) -> ExecutionResult:
    return ExecutionResult(status=status, message=message, duration=Duration(seconds=1))


def test_empty_results_have_no_status():
    assert select_result([]) is None
    assert select_status([]) is None
    assert is_failed(select_status([])) is False


def test_single_result_decides_status():
    results = [_make_result(TestStepResultStatus.SKIPPED)]
    assert select_status(results) == TestStepResultStatus.SKIPPED


def test_last_result_wins_after_retry():
    results = [
        _make_result(TestStepResultStatus.PASSED),
        _make_result(TestStepResultStatus.FAILED, "retry broke"),
    ]
    assert select_status(results) == TestStepResultStatus.FAILED
    assert select_result(results).message == "retry broke"


def test_later_pass_overrides_earlier_failure():
    results = [
        _make_result(TestStepResultStatus.FAILED),
        _make_result(TestStepResultStatus.PASSED),
    ]
    assert select_status(results) == TestStepResultStatus.PASSED


def test_selection_is_positional_not_by_severity():
    results = [
        _make_result(TestStepResultStatus.FAILED),
        _make_result(TestStepResultStatus.AMBIGUOUS),
        _make_result(TestStepResultStatus.UNKNOWN),
    ]
    assert select_status(results) == TestStepResultStatus.UNKNOWN


@pytest.mark.parametrize(
    "status",
    [s for s in TestStepResultStatus if s != TestStepResultStatus.FAILED],
)
def test_only_failed_counts_as_failed(status: TestStepResultStatus):
    assert is_failed(status) is False


def test_failed_status_is_failed():
    assert is_failed(TestStepResultStatus.FAILED) is True
