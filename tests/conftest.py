"""Global test fixtures."""

import logging

import pytest

from reportview.domain.report.model import Duration, ExecutionResult, TestStepResultStatus


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep a developer's own settings out of Config-driven tests
    for name in ("REPORTVIEW_CONFIG_FILE", "REPORTVIEW_LOG_FILE", "REPORTVIEW_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def failed_result() -> ExecutionResult:
    return ExecutionResult(
        status=TestStepResultStatus.FAILED,
        message="whoops",
        duration=Duration(seconds=1, nanos=0),
    )


@pytest.fixture
def passed_result() -> ExecutionResult:
    return ExecutionResult(
        status=TestStepResultStatus.PASSED,
        message="whoops",
        duration=Duration(seconds=1, nanos=0),
    )


@pytest.fixture
def root_logger(monkeypatch: pytest.MonkeyPatch):
    # configure_logging works on logging.getLogger(), which returns logging.root
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    yield root
    for handler in root.handlers:
        handler.close()
