# ============================================================================
# SCOPE: APPLICATION LAYER (Sedo)
# Description: Ports (interfaces) for external systems.
# ============================================================================
"""Sedo Application Ports.

Contains the interface definitions the client depends on:
- ISoapInvoker: invokes one remote procedure
- SoapFault: error value returned by invokers
"""

from .fault import SoapFault
from .soap_invoker import ISoapInvoker

__all__ = [
    "ISoapInvoker",
    "SoapFault",
]
