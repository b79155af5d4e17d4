# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Sedo)
# Description: Sedo SOAP client module.
# ============================================================================
"""Sedo SOAP Module.

Components:
- ZeepSoapInvoker: ISoapInvoker implementation on top of zeep
- HttpxTransport: zeep transport that talks HTTP through httpx
- MethodRegistry: Extensible operation configuration with bulk limits

Usage:
    from sedo_client.infrastructure.soap import ZeepSoapInvoker

    invoker = ZeepSoapInvoker.from_wsdl(
        "https://api.sedo.com/api/sedointerface.php?wsdl",
        timeout=30,
    )
    result = invoker.invoke("DomainList", {"name": request})
"""

from .method_registry import MethodConfig, MethodRegistry, create_default_registry, get_default_registry
from .transport import HttpxTransport
from .zeep_invoker import ZeepSoapInvoker

__all__ = [
    "ZeepSoapInvoker",
    "HttpxTransport",
    "MethodRegistry",
    "MethodConfig",
    "create_default_registry",
    "get_default_registry",
]
