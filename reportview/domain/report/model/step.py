from reportview.domain.report.model.base import MessageValue


class TestStep(MessageValue):
    """A hook invocation within a test case."""

    __test__ = False  # keep pytest from collecting it

    id: str
    hook_id: str
