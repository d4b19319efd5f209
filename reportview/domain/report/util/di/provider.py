from dishka import Scope, from_context, provide

from reportview.domain.report.port.query import ReportQuery
from reportview.domain.report.service.hook_step import HookStepService
from reportview.util.di.base import Provider


class ReportProvider(Provider):
    query = from_context(provides=ReportQuery, scope=Scope.APP)

    service = provide(HookStepService, scope=Scope.REQUEST)
