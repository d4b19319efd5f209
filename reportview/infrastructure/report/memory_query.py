"""In-memory report query."""

import logging
from collections.abc import Iterable, Mapping, Sequence

from reportview.domain.report.model.hook import HookDescriptor
from reportview.domain.report.model.result import ExecutionResult
from reportview.domain.report.port.query import ReportQuery
from reportview.domain.shared.error import ConflictError

logger = logging.getLogger(__name__)


class InMemoryReportQuery(ReportQuery):
    """Report query backed by plain dictionaries.

    Populate it up front with ``add_result``/``add_hook``; lookups never
    mutate it, so a filled instance can be shared between callers.
    """

    def __init__(
        self,
        results: Mapping[str, Iterable[ExecutionResult]] | None = None,
        hooks: Iterable[HookDescriptor] | None = None,
    ) -> None:
        """Initialize with optional results keyed by step id and hook definitions.

        Args:
            results: Results per step id, oldest first
            hooks: Hook definitions, each registered under its own id

        Raises:
            ConflictError: If two hooks share an id
        """
        self._results: dict[str, list[ExecutionResult]] = {
            step_id: list(step_results) for step_id, step_results in (results or {}).items()
        }
        self._hooks: dict[str, HookDescriptor] = {}
        for hook in hooks or ():
            self.add_hook(hook)

    def add_result(self, step_id: str, result: ExecutionResult) -> None:
        """Append a result; the latest one added decides the step's status."""
        self._results.setdefault(step_id, []).append(result)

    def add_hook(self, hook: HookDescriptor) -> None:
        """Register a hook definition.

        Raises:
            ConflictError: If a hook with the same id is already registered
        """
        if hook.id in self._hooks:
            raise ConflictError(f"Hook already registered: {hook.id}", code="duplicate_hook")
        self._hooks[hook.id] = hook
        logger.debug("Registered hook %s", hook.id)

    def get_test_step_results(self, step_id: str) -> Sequence[ExecutionResult]:
        return tuple(self._results.get(step_id, ()))

    def get_hook(self, hook_id: str) -> HookDescriptor | None:
        return self._hooks.get(hook_id)
