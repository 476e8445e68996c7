"""HTTP client for the remote sales collection."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..logging_config import get_logger

logger = get_logger(__name__)

COLLECTION_PATH = "/sales"


class SalesApiError(RuntimeError):
    """Raised when a call to the sales backend fails."""

    def __init__(self, message: str, *, operation: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code


class SalesApiClient:
    """Talks to ``/sales`` and ``/sales/{id}`` on the configured backend.

    Timeouts belong to the underlying ``httpx.Client``; nothing here retries.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> SalesApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _item_path(entry_id: str) -> str:
        return f"{COLLECTION_PATH}/{entry_id}"

    def _request(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise SalesApiError(
                f"{operation} failed with HTTP {status_code}: {exc.response.text[:200]}",
                operation=operation,
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise SalesApiError(
                f"{operation} failed: {exc}",
                operation=operation,
            ) from exc
        logger.debug(
            "Sales API call completed",
            extra={"operation": operation, "status_code": response.status_code},
        )
        return response

    @staticmethod
    def _json_or_none(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning(
                "Sales API returned a non-JSON body",
                extra={"status_code": response.status_code, "url": str(response.request.url)},
            )
            return None

    def list_entries(self) -> Any:
        return self._json_or_none(self._request("list", "GET", COLLECTION_PATH))

    def create_entry(self, payload: dict[str, Any]) -> Any:
        body = {key: value for key, value in payload.items() if key not in ("_id", "id")}
        return self._json_or_none(self._request("create", "POST", COLLECTION_PATH, json=body))

    def update_entry(self, entry_id: str, payload: dict[str, Any]) -> Any:
        return self._json_or_none(
            self._request("update", "PUT", self._item_path(entry_id), json=payload)
        )

    def delete_entry(self, entry_id: str) -> None:
        self._request("delete", "DELETE", self._item_path(entry_id))
