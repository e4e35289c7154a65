"""
HTTP client for the admindash data service.

Thin wrapper over the /api/data collection: every call is one HTTP request,
failures are raised as ApiRequestError carrying the server's message.
"""

import json
import logging
import ssl
from typing import Any, Dict, List, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

logger = logging.getLogger("admindash.dashboard")


class ApiRequestError(Exception):
    """A request to the data service failed (HTTP error status or no connection)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class RecordsApiClient:
    """HTTP client for the record collection endpoint."""

    def __init__(self, api_url: str, timeout: int = 10):
        """
        Initialize HTTP client.

        Args:
            api_url: Collection URL of the data service (e.g., http://host:5000/api/data)
            timeout: Request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._ssl_context = ssl.create_default_context()

    def _request(self, method: str, endpoint: str = "", data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make one request and decode the JSON response.

        Raises:
            ApiRequestError: On HTTP error statuses and connection errors
        """
        url = f"{self.api_url}{endpoint}"
        headers = {"Accept": "application/json"}
        body = None
        if data is not None:
            body = json.dumps(data).encode("utf-8")
            headers["Content-Type"] = "application/json"
        req = Request(url, data=body, headers=headers, method=method)

        # Use SSL context for HTTPS URLs
        ssl_context = self._ssl_context if url.startswith("https://") else None

        try:
            with urlopen(req, timeout=self.timeout, context=ssl_context) as resp:
                raw = resp.read().decode("utf-8")
                return json.loads(raw) if raw else {}
        except HTTPError as e:
            raise ApiRequestError(self._error_message(e), status_code=e.code) from e
        except URLError as e:
            raise ApiRequestError(f"cannot reach {url}: {e.reason}") from e

    @staticmethod
    def _error_message(error: HTTPError) -> str:
        """Pull {"message": ...} out of an error response, falling back to the reason phrase."""
        try:
            payload = json.loads(error.read().decode("utf-8") or "{}")
        except (ValueError, OSError):
            payload = {}
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return str(error.reason)

    def list_records(self) -> List[Dict[str, Any]]:
        return self._request("GET")

    def create_record(self, category: str, value: float) -> Dict[str, Any]:
        return self._request("POST", data={"category": category, "value": value})

    def delete_record(self, record_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/{quote(record_id, safe='')}")

    def delete_all(self) -> Dict[str, Any]:
        return self._request("DELETE")
