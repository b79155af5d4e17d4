# ============================================================================
# SCOPE: APPLICATION LAYER (Sedo)
# Description: Fault value returned by SOAP invokers.
# ============================================================================
"""SOAP Fault Value.

Contains the SoapFault dataclass returned by invokers in place of a result.
This is in a separate file to avoid circular imports.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class SoapFault:
    """Error value returned by the remote service.

    Invokers return this instead of raising, so the client can store it as
    the response before surfacing it to the caller.
    """

    code: str
    message: str
    actor: str | None = None
    detail: str | None = None

    @classmethod
    def client(cls, message: str) -> "SoapFault":
        """Factory for faults caused by the request itself."""
        return cls(code="Client", message=message)

    @classmethod
    def http(cls, message: str) -> "SoapFault":
        """Factory for transport level failures."""
        return cls(code="HTTP", message=message)

    def as_dict(self) -> dict[str, Any]:
        """Plain mapping used for JSON serialization."""
        data: dict[str, Any] = {"faultcode": self.code, "faultstring": self.message}
        if self.actor is not None:
            data["faultactor"] = self.actor
        if self.detail is not None:
            data["detail"] = self.detail
        return data
