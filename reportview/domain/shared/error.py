"""Error hierarchy for reportview.

Error layers:
- ReportViewError: Base class for all reportview errors
- DomainError: Rule violations while building or querying report data
- InfrastructureError: Environment and wiring failures (configuration, logging)

Label resolution itself never raises; these errors belong to the
surrounding setup code.
"""


class ReportViewError(Exception):
    """Base class for all reportview errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(ReportViewError):
    """Base class for domain errors."""


class ConflictError(DomainError):
    """An entity with the same identifier is already registered."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(ReportViewError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
