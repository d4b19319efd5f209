from reportview.infrastructure.report.memory_query import InMemoryReportQuery

__all__ = ["InMemoryReportQuery"]
