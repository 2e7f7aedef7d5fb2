"""
Resolve slash separated paths to drive folder ids.

The drive only knows folders as a flat list of records with parent ids, so a path is resolved by
walking its segments over a freshly built directory index, keeping track of the parent that the
next segment should be in.
"""

import logging

from drivepath.config import DuplicateNames, get_settings
from drivepath.models import DirectoryIndex, DirectoryRecord, PathResolution, ResolvedSegment
from drivepath.paths.index import build_directory_index


class AmbiguousPathError(ValueError):
    pass


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty segments, so leading, trailing and double slashes are ignored"""
    return [segment for segment in path.split("/") if segment]


def is_root_eligible(record: DirectoryRecord, index: DirectoryIndex) -> bool:
    """
    A folder counts as a top level folder if it has no parents, or if none of its parents are folders we know of.
    (Top level folders on shared drives have the drive itself as parent, which is not listed as a folder)
    """
    return not any(parent in index for parent in record.parents)


def find_directory(name: str, parent: str | None, index: DirectoryIndex) -> str | None:
    """
    Find the id of the folder with this name (case insensitive) in the given parent,
    or at the top level if parent is None.
    """
    wanted = name.casefold()
    first_wins = get_settings().duplicate_names == DuplicateNames.first
    matches = []
    for id, record in index.items():
        if record.name.casefold() != wanted:
            continue
        if parent is None and not is_root_eligible(record, index):
            continue
        if parent is not None and parent not in record.parents:
            continue
        if first_wins:
            return id
        matches.append(id)

    if len(matches) > 1:
        where = f"folder {parent}" if parent else "the top level"
        raise AmbiguousPathError(f"Found {len(matches)} folders named {name!r} in {where}: {', '.join(matches)}")
    return matches[0] if matches else None


def resolve_path(path: str, index: DirectoryIndex | None = None) -> PathResolution:
    """
    Resolve each segment of the path to a folder id.
    Once a segment cannot be found, it and all later segments are left unresolved.
    If no index is given, the full folder listing is fetched from the drive.
    """
    segments = split_path(path)
    resolution = PathResolution(path=path)
    if not segments:
        return resolution
    if index is None:
        index = build_directory_index()

    parent: str | None = None
    broken = False
    for name in segments:
        id = None if broken else find_directory(name, parent, index)
        if id is None and not broken:
            logging.debug(f"Cannot resolve {name!r} in {path!r}")
            broken = True
        resolution.segments.append(ResolvedSegment(name=name, id=id))
        parent = id
    return resolution


def find_folder(path: str) -> str | None:
    """Return the id of the folder at this path, or None if any folder on the path does not exist"""
    return resolve_path(path).folder_id


def folder_exists(path: str) -> bool:
    return find_folder(path) is not None
