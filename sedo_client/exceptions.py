"""
Sedo client exceptions.

Every error raised by the client derives from SedoClientError, so callers can
catch the whole family with a single except clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sedo_client.application.ports import SoapFault


class SedoClientError(Exception):
    """Base exception for the Sedo client."""


class ClientInitializationError(SedoClientError):
    """
    The WSDL could not be fetched or parsed.

    Attributes:
        wsdl: URL of the service description that failed to load
    """

    def __init__(self, wsdl: str, message: str):
        self.wsdl = wsdl
        super().__init__(f"Unable to initialize SOAP client from {wsdl}: {message}")


class RemoteCallFault(SedoClientError):
    """
    The remote service answered with a fault instead of a result.

    Attributes:
        fault: The SoapFault value stored as the client response
    """

    def __init__(self, fault: SoapFault):
        self.fault = fault
        super().__init__(f"{fault.code}: {fault.message}")

    @property
    def code(self) -> str:
        return self.fault.code

    @property
    def message(self) -> str:
        return self.fault.message


class MaxElementsExceeded(SedoClientError):
    """Bulk data is larger than the operation allows."""

    def __init__(self, key: str, max_elements: int, count: int):
        self.key = key
        self.max_elements = max_elements
        self.count = count
        super().__init__(
            f"Max element exceeded, amount of data in {key} should not be more than {max_elements}"
        )


class UnableToOpenFileError(SedoClientError):
    """The call log file could not be opened for append."""

    def __init__(self, path: str, message: str = "Unable to open log file."):
        self.path = path
        super().__init__(f"{message} ({path})")
