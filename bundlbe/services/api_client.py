"""HTTP client for the BundlBe activation backend."""

import httpx
from typing import Any, Dict, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
import structlog

from bundlbe.config import Settings, settings as default_settings
from bundlbe.exceptions import (
    ConfigurationError,
    DecodeError,
    NetworkError,
    ResponseError,
    ServerError,
)
from bundlbe.models import (
    ActivationRequest,
    ActivationResponse,
    DuplicateRequest,
    DuplicateResponse,
)

logger = structlog.get_logger()

T = TypeVar("T", bound=BaseModel)


class BundlBeAPIClient:
    """Async HTTP client for the activation backend endpoints."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            settings: Client settings, defaults to the global settings
            transport: Optional httpx transport, used to stub the network in tests
        """
        self.settings = settings or default_settings
        self.base_url = self.settings.api_base_url_normalized
        self.timeout = self.settings.request_timeout_seconds
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for backend requests."""
        return {
            "Content-Type": "application/json",
        }

    def _build_url(self, path: str) -> httpx.URL:
        """Join the base URL and path, rejecting anything that is not an absolute http(s) URL."""
        raw = self.base_url + path
        try:
            url = httpx.URL(raw)
        except (httpx.InvalidURL, TypeError, ValueError):
            logger.error("Invalid backend URL", url=raw)
            raise ConfigurationError(raw)

        if url.scheme not in ("http", "https") or not url.host:
            logger.error("Invalid backend URL", url=raw)
            raise ConfigurationError(raw)

        return url

    def _handle_response(self, response: httpx.Response, response_model: Type[T]) -> T:
        """Decode a backend response or raise the matching error."""
        status_code = response.status_code
        raw = response.text

        if 200 <= status_code < 300:
            try:
                return response_model.model_validate_json(response.content)
            except ValidationError as e:
                logger.warning(
                    "Decoding failed",
                    url=str(response.request.url),
                    status_code=status_code,
                    raw=raw,
                    error=str(e)
                )
                raise DecodeError(str(e), raw=raw)

        logger.warning(
            "Server error",
            url=str(response.request.url),
            status_code=status_code,
            raw=raw
        )

        try:
            decoded = ActivationResponse.model_validate_json(response.content)
        except ValidationError:
            raise ServerError(status_code=status_code, message=raw or None)

        raise ServerError(
            status_code=status_code,
            message=decoded.error,
            paywall_suppress=decoded.paywall_suppress
        )

    async def request(
        self,
        path: str,
        response_model: Type[T],
        body: Dict[str, Any],
        method: str = "POST"
    ) -> T:
        """
        Send a JSON request to the backend and decode the typed response.

        Args:
            path: Endpoint path, e.g. "/login"
            response_model: Pydantic model for a 2xx body
            body: JSON-serializable request body
            method: HTTP method, POST by default

        Returns:
            The decoded 2xx body

        Raises:
            ConfigurationError: If the endpoint URL is malformed (no request is sent)
            NetworkError: If the request could not be delivered
            ResponseError: If the server response is malformed at the HTTP level
            ServerError: If the status code is outside 200-299
            DecodeError: If a 2xx body does not match response_model
        """
        url = self._build_url(path)

        logger.debug("Sending backend request", method=method, path=path)

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    url,
                    headers=self._get_headers(),
                    json=body
                )
        except httpx.RemoteProtocolError as e:
            logger.error("Invalid server response", method=method, path=path, error=str(e))
            raise ResponseError(details={"error": str(e)})
        except httpx.TransportError as e:
            logger.error("Network error", method=method, path=path, error=str(e))
            raise NetworkError(str(e), details={"path": path})

        result = self._handle_response(response, response_model)
        logger.debug("Backend request succeeded", method=method, path=path, status_code=response.status_code)
        return result

    async def login(self, code: str, app_id: str, device_id: str) -> ActivationResponse:
        """
        Redeem an activation code.

        Args:
            code: User activation code
            app_id: Application identifier
            device_id: Device identifier

        Returns:
            The backend's activation response
        """
        payload = ActivationRequest(code=code, app_id=app_id, device_id=device_id)
        return await self.request("/login", ActivationResponse, payload.model_dump())

    async def logout(self, code: str, app_id: str, device_id: str) -> ActivationResponse:
        """Release an activation code on this device."""
        payload = ActivationRequest(code=code, app_id=app_id, device_id=device_id)
        return await self.request("/logout", ActivationResponse, payload.model_dump())

    async def post_duplicate(self, code: str, app_id: str) -> DuplicateResponse:
        """Tell the backend the user also holds a platform subscription."""
        payload = DuplicateRequest(code=code, app_id=app_id)
        return await self.request("/subscription-duplicate", DuplicateResponse, payload.model_dump(), method="POST")

    async def delete_duplicate(self, code: str, app_id: str) -> DuplicateResponse:
        """Tell the backend the user no longer holds a platform subscription."""
        payload = DuplicateRequest(code=code, app_id=app_id)
        return await self.request("/subscription-duplicate", DuplicateResponse, payload.model_dump(), method="DELETE")
