"""Sedo SOAP API client.

Usage:
    from sedo_client import SedoClient

    client = SedoClient("user", "secret", "sign-key", "12345")
    client.set_method("DomainList").set_params({"startfrom": 0}).call()
    domains = client.to_array()
"""

from .application.ports import ISoapInvoker, SoapFault
from .client import SedoClient
from .config import DEFAULT_WSDL, SedoSettings, get_settings
from .exceptions import (
    ClientInitializationError,
    MaxElementsExceeded,
    RemoteCallFault,
    SedoClientError,
    UnableToOpenFileError,
)
from .infrastructure.call_log import CallerContext, DailyCallLog
from .infrastructure.soap import HttpxTransport, MethodRegistry, ZeepSoapInvoker

__version__ = "0.1.0"

__all__ = [
    "SedoClient",
    "SedoSettings",
    "get_settings",
    "DEFAULT_WSDL",
    # Ports
    "ISoapInvoker",
    "SoapFault",
    # Infrastructure
    "ZeepSoapInvoker",
    "HttpxTransport",
    "MethodRegistry",
    "DailyCallLog",
    "CallerContext",
    # Errors
    "SedoClientError",
    "ClientInitializationError",
    "RemoteCallFault",
    "MaxElementsExceeded",
    "UnableToOpenFileError",
]
