"""HTTP client for the remote record-keeping API."""

from __future__ import annotations

from typing import Any, Optional

import requests

from ..config import BaseConfig
from ..errors import DataShapeError, NetworkError, NotFoundError
from ..logging_config import get_logger

logger = get_logger(__name__)


def expect_list(payload: Any, what: str) -> list[Any]:
    """Return ``payload`` if it is a JSON array, else raise DataShapeError."""

    if not isinstance(payload, list):
        raise DataShapeError(
            f"Invalid response format: expected a list of {what}, got {type(payload).__name__}"
        )
    return payload


def expect_object(payload: Any, what: str) -> dict[str, Any]:
    """Return ``payload`` if it is a JSON object, else raise DataShapeError."""

    if not isinstance(payload, dict):
        raise DataShapeError(
            f"Invalid response format: expected a {what} object, got {type(payload).__name__}"
        )
    return payload


class ApiClient:
    """Thin wrapper over ``requests.Session`` that maps failures to app errors."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """Issue a request and return the successful response.

        Raises NetworkError for transport failures and error statuses,
        NotFoundError for 404.
        """

        url = self.url(path)
        kwargs.setdefault("timeout", self.timeout)
        logger.debug("API request", extra={"method": method, "path": path})
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error(
                "API request failed", extra={"method": method, "path": path, "error": str(exc)}
            )
            raise NetworkError(f"Could not reach the server ({method} {path}): {exc}") from exc

        status = response.status_code
        if status == 404:
            logger.warning("API record not found", extra={"method": method, "path": path})
            raise NotFoundError(f"Record not found ({method} {path})", status=status)
        if not response.ok:
            detail = (response.text or "").strip()
            logger.error(
                "API returned error status",
                extra={"method": method, "path": path, "status": status, "detail": detail[:200]},
            )
            message = f"Request failed with status {status} ({method} {path})"
            if detail:
                message = f"{message}: {detail}"
            raise NetworkError(message, status=status)
        return response

    def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Issue a request and return the decoded JSON body (None when empty)."""

        response = self.send(method, path, **kwargs)
        if not (response.text or "").strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise DataShapeError(f"Server returned invalid JSON ({method} {path})") from exc

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, payload: dict[str, Any]) -> Any:
        return self.request("POST", path, json=payload)

    def put(self, path: str, payload: dict[str, Any]) -> Any:
        return self.request("PUT", path, json=payload)

    def delete(self, path: str) -> None:
        self.request("DELETE", path)

    def upload(self, path: str, *, files: dict[str, Any], data: dict[str, str]) -> Any:
        """POST a multipart form (used for trip images)."""
        return self.request("POST", path, files=files, data=data)

    def close(self) -> None:
        self.session.close()


def create_api_client(config: BaseConfig, session: Optional[requests.Session] = None) -> ApiClient:
    """Build an API client from configuration."""

    return ApiClient(config.API_URL, timeout=config.REQUEST_TIMEOUT, session=session)
