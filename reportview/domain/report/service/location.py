"""Describe where a failing hook is defined."""

from reportview.domain.report.model.hook import (
    FileLocation,
    HookDescriptor,
    MethodReference,
    SourceReference,
)

UNKNOWN_LOCATION = "Unknown location"


def format_location(reference: SourceReference | None) -> str:
    """Render a source reference as ``uri[:line]`` or ``Class.method``.

    Anything unusable (no reference, an empty one, a blank uri or method
    part) renders as the unknown-location text.
    """
    if isinstance(reference, FileLocation) and reference.uri:
        if reference.line is not None and reference.line > 0:
            return f"{reference.uri}:{reference.line}"
        return reference.uri
    if isinstance(reference, MethodReference) and reference.class_name and reference.method_name:
        return f"{reference.class_name}.{reference.method_name}"
    return UNKNOWN_LOCATION


def format_failure_label(hook: HookDescriptor | None) -> str:
    """Build the label shown for a failed hook step."""
    if hook is None:
        return f"Hook failed: {UNKNOWN_LOCATION}"
    location = format_location(hook.source_reference)
    if hook.name:
        return f'Hook "{hook.name}" failed: {location}'
    return f"Hook failed: {location}"
