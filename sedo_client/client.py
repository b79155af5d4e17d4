"""
Sedo SOAP API Client

Synchronous wrapper around the Sedo domain marketplace SOAP interface.
Credentials are merged into every request, one remote operation is invoked
per call, and request/response pairs can be appended to a daily log file.

Example:
    client = SedoClient("user", "secret", "sign-key", "12345")
    client.set_method("DomainList").set_params({"startfrom": 0}).call()
    domains = client.to_array()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sized
from typing import Any

from sedo_client.application.ports import ISoapInvoker, SoapFault
from sedo_client.config import DEFAULT_WSDL, SedoSettings, get_settings
from sedo_client.exceptions import MaxElementsExceeded, RemoteCallFault
from sedo_client.infrastructure.call_log import CallerContext, DailyCallLog
from sedo_client.infrastructure.soap import MethodRegistry, ZeepSoapInvoker, get_default_registry
from sedo_client.serialization import to_json, to_native

logger = logging.getLogger(__name__)


class SedoClient:
    """
    Request builder and invoker for the Sedo SOAP API.

    Holds fixed credentials plus the method and params of the next call.
    Not safe for concurrent use; give each thread its own instance.

    Attributes:
        method: Remote operation of the next call
        params: Caller parameters of the next call
        response: Result (or SoapFault) of the last call
    """

    def __init__(
        self,
        username: str,
        password: str,
        sign_key: str,
        partner_id: str,
        timeout: int = 30,
        wsdl: str = DEFAULT_WSDL,
        *,
        invoker: ISoapInvoker | None = None,
        log_enabled: bool = False,
        log_path: str = "",
        registry: MethodRegistry | None = None,
    ):
        """
        Initialize Sedo client.

        Args:
            username: Sedo account username
            password: Sedo account password
            sign_key: Partner sign key
            partner_id: Partner ID
            timeout: Connection timeout in seconds
            wsdl: URL of the service description
            invoker: Optional prebuilt invoker (skips loading the WSDL)
            log_enabled: Append each call to a daily log file
            log_path: Directory for the daily log files
            registry: Optional method registry for execute()

        Raises:
            ClientInitializationError: If the WSDL cannot be fetched or parsed
        """
        self._username = username
        self._password = password
        self._sign_key = sign_key
        self._partner_id = partner_id
        self._timeout = timeout
        self._wsdl = wsdl

        self._client: ISoapInvoker = (
            invoker if invoker is not None else ZeepSoapInvoker.from_wsdl(wsdl, timeout=timeout)
        )

        self._credential_params: dict[str, Any] = {
            "username": username,
            "password": password,
            "partnerid": partner_id,
            "signkey": sign_key,
        }

        self._params: dict[str, Any] = {}
        self._method: str | None = None
        self._response: Any = None

        self._log_enabled = log_enabled
        self._log_path = log_path
        self._caller: CallerContext | None = None
        self._registry = registry if registry is not None else get_default_registry()

    @classmethod
    def from_settings(
        cls,
        settings: SedoSettings | None = None,
        invoker: ISoapInvoker | None = None,
    ) -> SedoClient:
        """
        Build a client from SEDO_* settings.

        Args:
            settings: Settings to use (defaults to get_settings())
            invoker: Optional prebuilt invoker
        """
        settings = settings or get_settings()
        return cls(
            settings.SEDO_USERNAME,
            settings.SEDO_PASSWORD,
            settings.SEDO_SIGN_KEY,
            settings.SEDO_PARTNER_ID,
            timeout=settings.SEDO_TIMEOUT,
            wsdl=settings.SEDO_WSDL,
            invoker=invoker,
            log_enabled=settings.SEDO_LOG_ENABLED,
            log_path=settings.SEDO_LOG_PATH,
        )

    def close(self) -> None:
        """Release the invoker's HTTP resources, if it holds any."""
        close = getattr(self._client, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> SedoClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()

    # =========================================================================
    # Calls
    # =========================================================================

    def get_request(self) -> dict[str, Any]:
        """Params merged with credentials; credentials win on key collision."""
        return {**self._params, **self._credential_params}

    def call(self, caller: CallerContext | None = None) -> SedoClient:
        """
        Invoke the current method with the merged request.

        The result is stored as the response and logged before a fault is
        raised, so the fault stays readable on the instance.

        Args:
            caller: Network details for the log entry (defaults to set_caller())

        Returns:
            Self for method chaining

        Raises:
            ValueError: If no method was set
            RemoteCallFault: If the remote service returned a fault
            UnableToOpenFileError: If logging is enabled and the log file cannot be opened
        """
        if not self._method:
            raise ValueError("No method set. Call set_method() before call().")

        request = self.get_request()
        logger.debug(f"Calling Sedo method {self._method} with params {sorted(self._params)}")

        self._response = self._client.invoke(self._method, {"name": request})

        self._log(request, caller if caller is not None else self._caller)

        if isinstance(self._response, SoapFault):
            logger.warning(f"Sedo fault on {self._method}: {self._response.code} {self._response.message}")
            raise RemoteCallFault(self._response)

        return self

    def execute(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        caller: CallerContext | None = None,
    ) -> SedoClient:
        """
        Call a registered operation, checking its bulk limit first.

        Args:
            name: Registered method name (e.g., "domain_status")
            params: Request parameters
            caller: Network details for the log entry

        Raises:
            KeyError: If the method is not registered
            MaxElementsExceeded: If the bulk parameter is too large
        """
        config = self._registry.get(name)
        params = dict(params or {})

        if config.is_bulk:
            self.verify_max_elements(config.max_elements, config.bulk_data(params), config.bulk_key)

        return self.set_method(config.soap_method).set_params(params).call(caller)

    def verify_max_elements(self, max_elements: int, data: Sized, key: str) -> None:
        """
        Verify the max elements allowed for the data.

        Raises:
            MaxElementsExceeded: If len(data) > max_elements
        """
        count = len(data)
        if count > max_elements:
            raise MaxElementsExceeded(key, max_elements, count)

    def _log(self, request: Mapping[str, Any], caller: CallerContext | None) -> None:
        """Append the call to today's log file when logging is enabled."""
        if not self._log_enabled:
            return

        DailyCallLog(self._log_path).write(
            wsdl=self._wsdl,
            method=self._method,
            request=request,
            response=self._response,
            caller=caller,
        )

    # =========================================================================
    # Response conversion
    # =========================================================================

    def to_json(self) -> str:
        """Response as compact JSON text."""
        return to_json(self._response)

    def to_array(self) -> Any:
        """Response decoded back from JSON into plain dicts and lists."""
        return to_native(self._response)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def client(self) -> ISoapInvoker:
        return self._client

    def set_client(self, client: ISoapInvoker) -> SedoClient:
        self._client = client
        return self

    @property
    def params(self) -> dict[str, Any]:
        return self._params

    def set_params(self, params: Mapping[str, Any]) -> SedoClient:
        self._params = dict(params)
        return self

    @property
    def method(self) -> str | None:
        return self._method

    def set_method(self, method: str) -> SedoClient:
        self._method = method
        return self

    @property
    def request(self) -> dict[str, Any]:
        return self.get_request()

    @property
    def response(self) -> Any:
        return self._response

    @property
    def credential_params(self) -> dict[str, Any]:
        return self._credential_params

    def set_credential_params(self, credential_params: Mapping[str, Any]) -> SedoClient:
        self._credential_params = dict(credential_params)
        return self

    @property
    def username(self) -> str:
        return self._username

    def set_username(self, username: str) -> SedoClient:
        self._username = username
        self._credential_params["username"] = username
        return self

    @property
    def password(self) -> str:
        return self._password

    def set_password(self, password: str) -> SedoClient:
        self._password = password
        self._credential_params["password"] = password
        return self

    @property
    def sign_key(self) -> str:
        return self._sign_key

    def set_sign_key(self, sign_key: str) -> SedoClient:
        self._sign_key = sign_key
        self._credential_params["signkey"] = sign_key
        return self

    @property
    def partner_id(self) -> str:
        return self._partner_id

    def set_partner_id(self, partner_id: str) -> SedoClient:
        self._partner_id = partner_id
        self._credential_params["partnerid"] = partner_id
        return self

    @property
    def timeout(self) -> int:
        return self._timeout

    def set_timeout(self, timeout: int) -> SedoClient:
        """Store a new timeout. The current invoker keeps its own."""
        self._timeout = timeout
        return self

    @property
    def wsdl(self) -> str:
        return self._wsdl

    def set_wsdl(self, wsdl: str) -> SedoClient:
        """Store a new WSDL URL. The current invoker stays bound to the old one."""
        self._wsdl = wsdl
        return self

    @property
    def log_enabled(self) -> bool:
        return self._log_enabled

    def set_log_enabled(self, log_enabled: bool) -> SedoClient:
        self._log_enabled = log_enabled
        return self

    @property
    def log_path(self) -> str:
        return self._log_path

    def set_log_path(self, log_path: str) -> SedoClient:
        self._log_path = log_path
        return self

    @property
    def caller(self) -> CallerContext | None:
        return self._caller

    def set_caller(self, caller: CallerContext | None) -> SedoClient:
        self._caller = caller
        return self

    @property
    def registry(self) -> MethodRegistry:
        return self._registry

    def set_registry(self, registry: MethodRegistry) -> SedoClient:
        self._registry = registry
        return self
