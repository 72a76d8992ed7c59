"""HTTP transport for the Shippo API.

Thin wrapper around httpx: one blocking request per call, no retries.
Error responses raise ShippoApiError with a translated E-XXXX code, so
callers never see raw httpx exceptions.
"""

import logging
from typing import Any

import httpx

from shippo_client.config import DEFAULT_API_BASE
from shippo_client.errors.api_translation import translate_api_error
from shippo_client.errors.formatter import ShippoApiError
from shippo_client.errors.registry import get_error
from shippo_client.utils.redaction import redact_for_logging, sanitize_error_message

logger = logging.getLogger(__name__)


class HttpTransport:
    """Sends JSON requests to the Shippo API and decodes JSON responses."""

    def __init__(
        self,
        access_token: str,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize with credentials and base URL.

        Args:
            access_token: Shippo private access token.
            api_base: Base URL that resource paths are joined to.
            timeout: Seconds to wait for each request.
            transport: Optional httpx transport, e.g. httpx.MockTransport.

        Raises:
            ShippoApiError: E-5002 if no access token is given.
        """
        if not access_token:
            raise ShippoApiError.from_code("E-5002")
        self._client = httpx.Client(
            base_url=api_base,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"ShippoToken {access_token}",
                "Accept": "application/json",
            },
        )

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Perform one API call and return the decoded JSON object.

        Args:
            method: HTTP method, e.g. "GET" or "POST".
            path: Resource path relative to the API base, e.g. "parcels/".
            payload: JSON body, already validated by a request builder.
            params: Query string parameters; None values are dropped.

        Returns:
            Decoded JSON object.

        Raises:
            ShippoApiError: On transport failure, non-2xx status, or a body
                that is not a JSON object.
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        logger.debug(
            "%s %s params=%s payload=%s",
            method, path, params, redact_for_logging(payload or {}),
        )

        try:
            resp = self._client.request(method, path, json=payload, params=params)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed (transport): %s", method, path, exc)
            raise ShippoApiError.from_code(
                "E-3001",
                reason=sanitize_error_message(str(exc) or type(exc).__name__),
            ) from exc

        self._raise_for_status(resp)

        try:
            body = resp.json()
        except ValueError as exc:
            raise ShippoApiError.from_code(
                "E-4001",
                reason=sanitize_error_message(resp.text[:200]),
                status_code=resp.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise ShippoApiError.from_code(
                "E-4001",
                reason=f"got {type(body).__name__}",
                status_code=resp.status_code,
            )
        return body

    def _raise_for_status(self, resp: httpx.Response) -> None:
        """Raise ShippoApiError on non-2xx responses.

        Args:
            resp: httpx.Response to check.

        Raises:
            ShippoApiError: On status codes of 400 and above.
        """
        if resp.status_code < 400:
            return
        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {"detail": resp.text[:200]} if resp.text else None

        code, message, remediation = translate_api_error(resp.status_code, body)
        error_def = get_error(code)
        logger.warning(
            "%s %s returned %s (%s)",
            resp.request.method, resp.request.url.path, resp.status_code, code,
        )
        raise ShippoApiError(
            code=code,
            message=sanitize_error_message(message),
            remediation=remediation,
            is_retryable=error_def.is_retryable if error_def else False,
            details={"body": body} if body else {},
            status_code=resp.status_code,
        )
