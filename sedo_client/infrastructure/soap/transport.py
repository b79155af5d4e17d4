# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Sedo)
# Description: zeep transport backed by httpx.
# ============================================================================
"""HTTPX Transport for zeep.

zeep ships a requests based transport. This one routes WSDL loads and SOAP
POSTs through an httpx.Client so timeouts and connection handling follow the
rest of the stack. Responses are handed back to zeep in the requests shape it
parses.
"""

import logging

import httpx
import requests
from requests.structures import CaseInsensitiveDict
from zeep.transports import Transport

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Synchronous zeep transport using httpx.

    Example:
        >>> transport = HttpxTransport(timeout=30)
        >>> client = zeep.Client(wsdl, transport=transport)
    """

    def __init__(
        self,
        timeout: float = 30.0,
        operation_timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        """Initialize transport.

        Args:
            timeout: Timeout in seconds for loading the WSDL and its imports.
            operation_timeout: Timeout in seconds for SOAP operations.
                Defaults to timeout.
            client: Optional preconfigured httpx client.
        """
        if operation_timeout is None:
            operation_timeout = timeout
        super().__init__(timeout=timeout, operation_timeout=operation_timeout)

        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            headers={"User-Agent": "sedo-client/0.1.0"},
        )

    @property
    def client(self) -> httpx.Client:
        """Underlying httpx client."""
        return self._client

    def get(self, address, params, headers):
        response = self._client.get(
            address,
            params=params,
            headers=headers,
            timeout=self.operation_timeout,
        )
        return self._to_requests_response(response)

    def post(self, address, message, headers):
        logger.debug(f"HTTP Post to {address}")
        response = self._client.post(
            address,
            content=message,
            headers=headers,
            timeout=self.operation_timeout,
        )
        logger.debug(f"HTTP Response from {address} (status: {response.status_code})")
        return self._to_requests_response(response)

    def _load_remote_data(self, url):
        logger.debug(f"Loading remote data from: {url}")
        response = self._client.get(url, timeout=self.load_timeout)
        response.raise_for_status()
        return response.content

    def close(self) -> None:
        """Close the httpx client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    @staticmethod
    def _to_requests_response(response: httpx.Response) -> requests.Response:
        """Convert an httpx.Response to the requests.Response zeep expects."""
        converted = requests.Response()
        converted._content = response.content
        converted.status_code = response.status_code
        converted.headers = CaseInsensitiveDict(response.headers)
        converted.encoding = response.encoding
        converted.url = str(response.url)
        return converted
