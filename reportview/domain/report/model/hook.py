"""Hook definitions and the references locating them in source."""

from typing import Annotated, Any, Literal, Union

from pydantic import Field, field_validator

from reportview.domain.report.model.base import MessageValue


class FileLocation(MessageValue):
    """A hook defined at a position in a source file."""

    kind: Literal["file"] = "file"
    uri: str
    line: int | None = None
    column: int | None = None


class MethodReference(MessageValue):
    """A hook defined by a method on a class (JVM-style glue code)."""

    kind: Literal["method"] = "method"
    class_name: str
    method_name: str
    parameter_types: tuple[str, ...] = ()


class UnknownLocation(MessageValue):
    """A source reference that carries neither a file nor a method."""

    kind: Literal["unknown"] = "unknown"


SourceReference = Annotated[
    Union[FileLocation, MethodReference, UnknownLocation],
    Field(discriminator="kind"),
]


def _source_reference_from_message(value: dict[str, Any]) -> dict[str, Any]:
    """Map a report-format ``sourceReference`` dict onto one union case.

    A file uri wins over a method reference when both are present.

    Raises:
        ValueError: If ``location`` or ``javaMethod`` is not an object
    """
    if value.get("uri"):
        location = value.get("location") or {}
        if not isinstance(location, dict):
            raise ValueError("sourceReference.location must be an object")
        return {
            "kind": "file",
            "uri": value["uri"],
            "line": location.get("line"),
            "column": location.get("column"),
        }
    java_method = value.get("javaMethod")
    if java_method:
        if not isinstance(java_method, dict):
            raise ValueError("sourceReference.javaMethod must be an object")
        return {
            "kind": "method",
            "class_name": java_method.get("className", ""),
            "method_name": java_method.get("methodName", ""),
            "parameter_types": java_method.get("methodParameterTypes") or (),
        }
    return {"kind": "unknown"}


class HookDescriptor(MessageValue):
    """Static metadata about a hook definition."""

    id: str
    name: str | None = None
    source_reference: SourceReference | None = None

    @field_validator("source_reference", mode="before")
    @classmethod
    def _accept_message_shape(cls, value: Any) -> Any:
        if isinstance(value, dict) and "kind" not in value:
            return _source_reference_from_message(value)
        return value
