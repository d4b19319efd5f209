from dishka import Container, make_container

from reportview.config import Config, configure_logging
from reportview.domain.report.port.query import ReportQuery
from reportview.domain.report.util.di import ReportProvider


def create_container(query: ReportQuery, config: Config | None = None) -> Container:
    """Configure logging and build the container serving HookStepService.

    Call once at startup, before resolving any labels.
    """
    # Pydantic Settings populates from env vars when no config is given
    config = config or Config()
    configure_logging(config.logging)

    return make_container(
        ReportProvider(),
        context={ReportQuery: query},
    )
