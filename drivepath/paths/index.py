import logging

from drivepath.drive.files import FOLDER_FIELDS, folder_query, scan_files
from drivepath.models import DirectoryIndex, DirectoryRecord


def build_directory_index() -> DirectoryIndex:
    """
    Fetch all (non-trashed) folders the token can see, on all drives, and index them by id.
    The drive has no hierarchical query, so this is the full folder listing, fetched page by page.
    If the same id is listed twice, the last one wins.
    """
    index: DirectoryIndex = {}
    for item in scan_files(folder_query(), fields=FOLDER_FIELDS):
        record = DirectoryRecord(id=item["id"], name=item.get("name", ""), parents=item.get("parents") or ())
        index[record.id] = record
    logging.debug(f"Indexed {len(index)} folders")
    return index
