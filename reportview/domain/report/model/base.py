from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from reportview.domain.shared.model.value import ValueObject


class MessageValue(ValueObject):
    """Value object that also accepts the report format's camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
