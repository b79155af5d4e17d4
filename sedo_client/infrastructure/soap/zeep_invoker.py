# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Sedo)
# Description: ISoapInvoker implementation on top of zeep.
# ============================================================================
"""Zeep SOAP Invoker.

Invokes operations described by the Sedo WSDL. Remote failures are returned
as SoapFault values instead of raised, so the client can store them as the
call response before surfacing them.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx
import zeep
from lxml import etree
from zeep.exceptions import Error as ZeepError
from zeep.exceptions import Fault, TransportError

from ...application.ports import SoapFault
from ...exceptions import ClientInitializationError
from .transport import HttpxTransport

logger = logging.getLogger(__name__)


class ZeepSoapInvoker:
    """SOAP invoker backed by a zeep client.

    Implements the ISoapInvoker interface.
    """

    def __init__(self, client: zeep.Client):
        """Initialize invoker.

        Args:
            client: zeep client bound to the service WSDL.
        """
        self._client = client

    @classmethod
    def from_wsdl(
        cls,
        wsdl: str,
        timeout: float = 30.0,
        transport: HttpxTransport | None = None,
    ) -> "ZeepSoapInvoker":
        """Build an invoker by loading the WSDL.

        Args:
            wsdl: URL (or local path) of the service description.
            timeout: Connection and operation timeout in seconds.
            transport: Optional preconfigured transport.

        Returns:
            Invoker ready to call operations.

        Raises:
            ClientInitializationError: If the WSDL cannot be fetched or parsed.
        """
        transport = transport or HttpxTransport(timeout=timeout)
        try:
            client = zeep.Client(wsdl=wsdl, transport=transport)
        except (httpx.HTTPError, ZeepError, OSError, ValueError) as e:
            logger.error(f"Unable to load WSDL {wsdl}: {e}")
            raise ClientInitializationError(wsdl, str(e)) from e

        logger.info(f"SOAP client initialized from {wsdl}")
        return cls(client)

    @property
    def client(self) -> zeep.Client:
        """Underlying zeep client."""
        return self._client

    def close(self) -> None:
        """Close the HTTP client of an httpx backed transport."""
        transport = getattr(self._client, "transport", None)
        if isinstance(transport, HttpxTransport):
            transport.close()

    def invoke(self, method: str, arguments: Mapping[str, Any]) -> Any:
        """Invoke a remote operation.

        Args:
            method: Operation name as declared in the WSDL.
            arguments: Named arguments for the operation.

        Returns:
            Operation result, or SoapFault on any remote failure.
        """
        try:
            operation = self._client.service[method]
        except (AttributeError, ValueError):
            return SoapFault.client(f'Function ("{method}") is not a valid method for this service')

        try:
            return operation(**arguments)
        except Fault as e:
            logger.warning(f"SOAP fault calling {method}: {e.message}")
            return SoapFault(
                code=e.code or "Server",
                message=e.message,
                actor=e.actor,
                detail=self._detail_to_text(e.detail),
            )
        except (httpx.HTTPError, TransportError) as e:
            logger.error(f"Transport error calling {method}: {e}")
            return SoapFault.http(str(e))
        except (ZeepError, TypeError) as e:
            # zeep raises TypeError for arguments the operation does not declare
            logger.error(f"SOAP error calling {method}: {e}")
            return SoapFault.client(str(e))

    @staticmethod
    def _detail_to_text(detail: Any) -> str | None:
        """Render a fault detail element as text."""
        if detail is None:
            return None
        if isinstance(detail, etree._Element):
            return etree.tostring(detail, encoding="unicode")
        return str(detail)
