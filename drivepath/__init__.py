"""
Resolve filesystem style paths (folder/subfolder/file.txt) on a Google Drive
"""

from drivepath.connections import set_authorization_token
from drivepath.drive.client import TransportError
from drivepath.paths.locator import NotFoundError, delete_file, file_exists, find_file, search
from drivepath.paths.resolver import AmbiguousPathError, find_folder, folder_exists, resolve_path

__all__ = [
    "AmbiguousPathError",
    "NotFoundError",
    "TransportError",
    "delete_file",
    "file_exists",
    "find_file",
    "find_folder",
    "folder_exists",
    "resolve_path",
    "search",
    "set_authorization_token",
]
