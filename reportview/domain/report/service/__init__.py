from reportview.domain.report.service.hook_step import HookStepService
from reportview.domain.report.service.location import format_failure_label, format_location
from reportview.domain.report.service.result_selector import (
    is_failed,
    select_result,
    select_status,
)

__all__ = [
    "HookStepService",
    "format_failure_label",
    "format_location",
    "is_failed",
    "select_result",
    "select_status",
]
