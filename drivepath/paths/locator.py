import logging
import posixpath

from drivepath.drive import files
from drivepath.models import DriveFile
from drivepath.paths.resolver import find_folder, split_path


class NotFoundError(ValueError):
    pass


def split_entry_path(path: str) -> tuple[str | None, str]:
    """
    Split a path into the folder path and the name of the entry.
    The folder path is None if the entry is at the top level (e.g. 'x.txt', './x.txt' or '/x.txt')
    """
    dirname, basename = posixpath.split(path.rstrip("/"))
    if not split_path(dirname) or dirname == ".":
        return None, basename
    return dirname, basename


def search(name: str, parent_id: str | None = None) -> list[DriveFile]:
    """
    Find all files or folders with exactly this name, optionally only in the given parent folder
    """
    return [file for file in _scan_entries(name, parent_id) if file.name == name]


def find_file(path: str) -> DriveFile | None:
    """
    Find the file (or folder) at the given path.
    Folder names in the path are matched case insensitively, the final name must match exactly.
    """
    dirname, basename = split_entry_path(path)
    if not basename:
        return None

    parent_id = None
    if dirname is not None:
        parent_id = find_folder(dirname)
        if parent_id is None:
            logging.debug(f"Folder {dirname!r} does not exist, so neither does {path!r}")
            return None

    # The drive query can also return partial matches, so check the name ourselves
    for file in _scan_entries(basename, parent_id):
        if file.name == basename:
            return file
    return None


def file_exists(path: str) -> bool:
    return find_file(path) is not None


def delete_file(path: str) -> dict | None:
    """
    Delete the file at the given path, returning the response of the drive.
    Raises NotFoundError if there is no such file.
    """
    file = find_file(path)
    if file is None:
        raise NotFoundError(f"File {path!r} does not exist")
    logging.info(f"Deleting {path!r} (id {file.id})")
    return files.delete_file(file.id)


def _scan_entries(name: str, parent_id: str | None):
    for item in files.scan_files(files.entry_query(name, parent_id), fields=files.ENTRY_FIELDS):
        yield DriveFile.model_validate(item)
