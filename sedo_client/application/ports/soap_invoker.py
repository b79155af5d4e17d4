# ============================================================================
# SCOPE: APPLICATION LAYER (Sedo)
# Description: Remote procedure call port.
# ============================================================================
"""SOAP Invoker Port.

Defines the interface the client uses to reach the remote service.
Implementations: ZeepSoapInvoker, test stubs.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .fault import SoapFault


@runtime_checkable
class ISoapInvoker(Protocol):
    """Interface for invoking a named remote procedure."""

    def invoke(self, method: str, arguments: Mapping[str, Any]) -> "Any | SoapFault":
        """Invoke a remote procedure.

        Args:
            method: Remote operation name.
            arguments: Named arguments for the operation.

        Returns:
            The remote result, or a SoapFault when the call failed.
            Implementations must not raise for remote errors.
        """
        ...
