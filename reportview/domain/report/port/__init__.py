from reportview.domain.report.port.query import ReportQuery

__all__ = [
    "ReportQuery",
]
