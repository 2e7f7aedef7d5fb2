"""
List and delete files on the drive.
Folders are files too on the drive, with a special mime type; see folder_query.
"""

import logging
from typing import Any, Iterable
from urllib.parse import quote as quote_path

from typing_extensions import TypedDict

from drivepath.config import get_settings
from drivepath.connections import drive
from drivepath.models import FOLDER_MIME_TYPE

FOLDER_FIELDS = "nextPageToken, files(id, name, parents)"
ENTRY_FIELDS = "nextPageToken, files(id, name, mimeType, fileExtension, parents)"


class ListResults(TypedDict):
    items: list[dict[str, Any]]
    next_page_token: str | None
    is_last_page: bool


def quote(value: str) -> str:
    """Quote a string value for use in a drive query"""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def folder_query() -> str:
    return f"mimeType = {quote(FOLDER_MIME_TYPE)} and trashed = false"


def entry_query(name: str, parent_id: str | None = None) -> str:
    """
    Query for non-trashed files (or folders) with this name, optionally only within the given parent.
    Note that the drive may return partial matches as well, so always check the names of the results.
    """
    q = f"name = {quote(name)} and trashed = false"
    if parent_id:
        q = f"{q} and {quote(parent_id)} in parents"
    return q


def list_files(
    q: str,
    fields: str = ENTRY_FIELDS,
    page_size: int | None = None,
    next_page_token: str | None = None,
) -> ListResults:
    settings = get_settings()
    params: dict[str, Any] = {
        "q": q,
        "fields": fields,
        "pageSize": page_size or settings.page_size,
    }
    if settings.all_drives:
        params["supportsAllDrives"] = "true"
        params["includeItemsFromAllDrives"] = "true"
        params["corpora"] = "allDrives"
    if next_page_token:
        params["pageToken"] = next_page_token

    res = drive().get("files", params=params)
    token = res.get("nextPageToken") or None
    return {
        "items": res.get("files") or [],
        "next_page_token": token,
        "is_last_page": token is None,
    }


def scan_files(q: str, fields: str = ENTRY_FIELDS, page_size: int | None = None) -> Iterable[dict[str, Any]]:
    """
    Yield all files matching the query, fetching pages as needed.
    Continues until the drive stops returning a page token, even if a page is empty.
    """
    token = None
    page = 0
    while True:
        res = list_files(q, fields=fields, page_size=page_size, next_page_token=token)
        page += 1
        logging.debug(f"Drive listing page {page}: {len(res['items'])} items, last page? {res['is_last_page']}")
        yield from res["items"]
        if res["is_last_page"]:
            return
        token = res["next_page_token"]


def delete_file(file_id: str) -> dict | None:
    """Permanently delete a file by id. Returns the (usually empty) api response"""
    params = {"supportsAllDrives": "true"} if get_settings().all_drives else None
    return drive().delete(f"files/{quote_path(file_id)}", params=params)
