"""Hook step service: turns recorded report data into a display label."""

import logging

from reportview.domain.report.model.label import ResolvedLabel
from reportview.domain.report.model.step import TestStep
from reportview.domain.report.port.query import ReportQuery
from reportview.domain.report.service.location import format_failure_label
from reportview.domain.report.service.result_selector import is_failed, select_result
from reportview.domain.shared.service import Service

logger = logging.getLogger(__name__)


class HookStepService(Service):
    """Resolves whether a hook step failed and where the hook lives."""

    query: ReportQuery

    def resolve(self, step: TestStep) -> ResolvedLabel:
        """Resolve the label for one hook step.

        Only the latest recorded result counts. The hook definition is looked
        up only when that result failed; a missing definition falls back to
        the unknown-location label instead of raising.
        """
        result = select_result(self.query.get_test_step_results(step.id))
        if result is None or not is_failed(result.status):
            return ResolvedLabel.passed()

        hook = self.query.get_hook(step.hook_id)
        if hook is None:
            logger.warning("Hook %s for failed step %s not found", step.hook_id, step.id)

        text = format_failure_label(hook)
        logger.debug("Step %s failed: %s", step.id, text)
        return ResolvedLabel(failed=True, text=text, message=result.message)
