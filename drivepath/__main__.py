"""
drivepath: find, check and delete files on a Google Drive by path
"""

import argparse
import logging
import sys
from enum import Enum

from drivepath.config import ENV_PREFIX, get_settings
from drivepath.connections import MissingTokenError, set_authorization_token
from drivepath.drive.client import TransportError
from drivepath.models import DriveFile
from drivepath.paths.locator import NotFoundError, delete_file, file_exists, find_file, search
from drivepath.paths.resolver import AmbiguousPathError, find_folder, folder_exists, resolve_path

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _print_file(file: DriveFile):
    kind = "folder" if file.is_folder else (file.mime_type or "file")
    print(f"{file.id}\t{kind}\t{file.name}")


def check_folder(args) -> int:
    exists = folder_exists(args.path)
    print("yes" if exists else "no")
    return EXIT_OK if exists else EXIT_NOT_FOUND


def check_file(args) -> int:
    exists = file_exists(args.path)
    print("yes" if exists else "no")
    return EXIT_OK if exists else EXIT_NOT_FOUND


def find(args) -> int:
    file = find_file(args.path)
    if file is None:
        logging.error(f"{args.path} not found")
        return EXIT_NOT_FOUND
    _print_file(file)
    return EXIT_OK


def delete(args) -> int:
    delete_file(args.path)
    print(f"Deleted {args.path}")
    return EXIT_OK


def resolve(args) -> int:
    resolution = resolve_path(args.path)
    for segment in resolution.segments:
        print(f"{segment.name}\t{segment.id or '-'}")
    return EXIT_OK if resolution.complete else EXIT_NOT_FOUND


def search_name(args) -> int:
    parent_id = None
    if args.folder:
        parent_id = find_folder(args.folder)
        if parent_id is None:
            logging.error(f"Folder {args.folder} not found")
            return EXIT_NOT_FOUND
    results = search(args.name, parent_id)
    for file in results:
        _print_file(file)
    return EXIT_OK if results else EXIT_NOT_FOUND


def show_config(_args) -> int:
    settings = get_settings()
    print(f"Reading settings from environment and {settings.env_file}")
    for fieldname, fieldinfo in type(settings).model_fields.items():
        value = getattr(settings, fieldname)
        if fieldname == "authorization_token" and value:
            value = "<hidden>"
        if doc := fieldinfo.description:
            print(f"# {doc}")
        if isinstance(value, Enum):
            print("# Valid options:")
            for option in type(value):
                print(f"# - {option.name}: {option.__doc__}")
        print(f"{ENV_PREFIX.upper()}{fieldname.upper()}={getattr(value, 'value', value)}")
    return EXIT_OK


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m drivepath")
    parser.add_argument("--token", help="OAuth bearer token (default: DRIVEPATH_AUTHORIZATION_TOKEN)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and resolution steps")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("folder-exists", help="Check whether a folder exists")
    p.add_argument("path", help="Folder path, e.g. projects/2024")
    p.set_defaults(func=check_folder)

    p = subparsers.add_parser("file-exists", help="Check whether a file exists")
    p.add_argument("path", help="File path, e.g. projects/2024/report.pdf")
    p.set_defaults(func=check_file)

    p = subparsers.add_parser("find", help="Print the id, type and name of the file at a path")
    p.add_argument("path")
    p.set_defaults(func=find)

    p = subparsers.add_parser("delete", help="Permanently delete the file at a path")
    p.add_argument("path")
    p.set_defaults(func=delete)

    p = subparsers.add_parser("resolve", help="Show the folder id for each segment of a path")
    p.add_argument("path")
    p.set_defaults(func=resolve)

    p = subparsers.add_parser("search", help="Find all files with exactly this name")
    p.add_argument("name")
    p.add_argument("-f", "--folder", help="Only search in this folder (path)")
    p.set_defaults(func=search_name)

    p = subparsers.add_parser("config", help="Show the current settings")
    p.set_defaults(func=show_config)

    args = parser.parse_args(argv)

    logging.basicConfig(
        format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.DEBUG if args.verbose else logging.INFO
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if args.token:
        set_authorization_token(args.token)

    try:
        return args.func(args)
    except NotFoundError as e:
        logging.error(str(e))
        return EXIT_NOT_FOUND
    except (TransportError, MissingTokenError, AmbiguousPathError) as e:
        logging.error(str(e))
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
