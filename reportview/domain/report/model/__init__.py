from reportview.domain.report.model.hook import (
    FileLocation,
    HookDescriptor,
    MethodReference,
    SourceReference,
    UnknownLocation,
)
from reportview.domain.report.model.label import ResolvedLabel
from reportview.domain.report.model.result import Duration, ExecutionResult, TestStepResultStatus
from reportview.domain.report.model.step import TestStep

__all__ = [
    "Duration",
    "ExecutionResult",
    "FileLocation",
    "HookDescriptor",
    "MethodReference",
    "ResolvedLabel",
    "SourceReference",
    "TestStep",
    "TestStepResultStatus",
    "UnknownLocation",
]
