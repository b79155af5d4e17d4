# Infrastructure Layer - Sedo
# Contains the SOAP invoker, transport and call log

from .call_log import CallerContext, DailyCallLog

__all__ = [
    "CallerContext",
    "DailyCallLog",
]
