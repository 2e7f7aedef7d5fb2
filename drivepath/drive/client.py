"""
Minimal synchronous client for the Drive v3 REST API.
Use drivepath.connections.drive() to get the shared client instead of creating one yourself.
"""

import logging
from typing import Any

import requests


class TransportError(Exception):
    """Any failure talking to the drive: network problems, authorization, quota, or an error response"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DriveClient:
    def __init__(self, token: str, api_url: str, timeout: float = 30):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers["Authorization"] = f"Bearer {token}"
        self.session.headers["Accept"] = "application/json"

    def request(self, method: str, path: str, params: dict[str, Any] | None = None) -> dict | None:
        """
        Do a request on the api and return the parsed json body (or None for an empty response).
        All failures are raised as TransportError
        """
        url = f"{self.api_url}/{path.lstrip('/')}"
        logging.debug(f"{method} {url} {params or ''}")
        try:
            res = self.session.request(method, url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        if not res.ok:
            raise TransportError(f"{method} {url} returned {res.status_code}: {_error_message(res)}", res.status_code)
        if not res.content:
            return None
        try:
            return res.json()
        except ValueError as e:
            raise TransportError(f"{method} {url} returned invalid json: {e}", res.status_code) from e

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict:
        return self.request("GET", path, params) or {}

    def delete(self, path: str, params: dict[str, Any] | None = None) -> dict | None:
        return self.request("DELETE", path, params)

    def close(self) -> None:
        self.session.close()


def _error_message(res: requests.Response) -> str:
    """Get the error message from a google api error response, falling back to the raw text"""
    try:
        body = res.json()
    except ValueError:
        return res.text or res.reason
    error = body.get("error", {}) if isinstance(body, dict) else body
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return str(error) or res.reason
