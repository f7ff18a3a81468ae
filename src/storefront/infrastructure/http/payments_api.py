"""httpx-backed access to the payments backend.

Every call returns the decoded JSON object or raises one of the
GatewayError subclasses; callers never see httpx exceptions or raw
``{"error": ...}`` payloads.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from storefront.domain.exceptions import ApiError, NetworkError, ParseError
from storefront.domain.repository.payments_gateway import PaymentsGateway

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://crypdeep.herokuapp.com"
DEFAULT_TIMEOUT = 10.0


class PaymentsApi(PaymentsGateway):

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> PaymentsApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # --- Endpoints ------------------------------------------------------------

    async def get_config(self) -> dict[str, Any]:
        return await self._request("GET", "/config")

    async def list_products(self) -> dict[str, Any]:
        return await self._request("GET", "/products")

    async def create_order(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/orders", json=payload)

    async def pay_order(self, order_id: str, source: Any) -> dict[str, Any]:
        return await self._request(
            "POST", f"/orders/{_segment(order_id)}/pay", json={"source": source}
        )

    async def get_order(self, order_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/orders/{_segment(order_id)}")

    # --- Internal helpers -----------------------------------------------------

    async def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as exc:
            logger.debug("%s %s failed: %r", method, path, exc)
            raise NetworkError(
                f"{method} {path} failed: {str(exc) or type(exc).__name__}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(
                f"{method} {path} returned a non-JSON body "
                f"(HTTP {response.status_code})"
            ) from exc

        if isinstance(payload, dict) and payload.get("error"):
            error = _api_error(payload["error"])
            logger.warning("%s %s rejected: %s", method, path, error.message)
            raise error

        if response.is_error:
            raise ApiError(
                f"HTTP {response.status_code} {response.reason_phrase}".strip()
            )

        if not isinstance(payload, dict):
            raise ParseError(
                f"{method} {path} returned {type(payload).__name__}, expected an object"
            )
        return payload


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def _api_error(error: Any) -> ApiError:
    """Build an ApiError from a string or ``{"message", "code"}`` error field."""
    if isinstance(error, dict):
        message = error.get("message") or error.get("code") or str(error)
        return ApiError(str(message), code=error.get("code"))
    return ApiError(str(error))
