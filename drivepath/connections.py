import logging
import threading

from drivepath.config import get_settings
from drivepath.drive.client import DriveClient


class MissingTokenError(ValueError):
    pass


class DriveConnections:
    token: str | None
    client: DriveClient | None

    def __init__(self, token: str | None = None, client: DriveClient | None = None):
        self.token = token
        self.client = client
        self.lock = threading.Lock()


CONNECTIONS = DriveConnections()


def set_authorization_token(token: str) -> None:
    """
    Set the bearer token used for all drive requests in this process.
    An already created client was built with the old token, so it is dropped and rebuilt on next use.
    """
    with CONNECTIONS.lock:
        if CONNECTIONS.token == token:
            return
        CONNECTIONS.token = token
        _close_client()


def drive() -> DriveClient:
    """
    Use this function to access the drive client.
    The client is created on first use and shared for the lifetime of the process.
    """
    client = CONNECTIONS.client
    if client is not None:
        return client
    with CONNECTIONS.lock:
        if CONNECTIONS.client is None:
            CONNECTIONS.client = _connect_drive()
        return CONNECTIONS.client


def close_drive() -> None:
    with CONNECTIONS.lock:
        _close_client()


def _connect_drive() -> DriveClient:
    settings = get_settings()
    token = CONNECTIONS.token or settings.authorization_token
    if not token:
        raise MissingTokenError(
            "No authorization token, use set_authorization_token or set DRIVEPATH_AUTHORIZATION_TOKEN"
        )
    logging.debug(f"Connecting with drive api at {settings.api_url}")
    return DriveClient(token, api_url=settings.api_url, timeout=settings.timeout)


def _close_client() -> None:
    if CONNECTIONS.client is not None:
        CONNECTIONS.client.close()
        CONNECTIONS.client = None
