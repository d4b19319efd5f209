from pydantic import model_validator
from typing_extensions import Self

from reportview.domain.shared.model.value import ValueObject


class ResolvedLabel(ValueObject):
    """What the presentation layer shows for a hook step.

    ``text`` is set exactly when ``failed`` is true; ``message`` carries the
    failing result's message and is only ever set on a failed label.
    """

    failed: bool
    text: str | None = None
    message: str | None = None

    @model_validator(mode="after")
    def check_text_matches_failed(self) -> Self:
        if self.failed and self.text is None:
            raise ValueError("a failed label needs text")
        if not self.failed and (self.text is not None or self.message is not None):
            raise ValueError("a label that did not fail carries no text or message")
        return self

    @classmethod
    def passed(cls) -> "ResolvedLabel":
        return cls(failed=False)
