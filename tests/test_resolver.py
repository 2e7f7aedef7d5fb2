import pytest

from drivepath.config import DuplicateNames
from drivepath.models import DirectoryRecord
from drivepath.paths.resolver import (
    AmbiguousPathError,
    find_directory,
    find_folder,
    folder_exists,
    resolve_path,
    split_path,
)


def test_split_path():
    assert split_path("a/b/c") == ["a", "b", "c"]
    assert split_path("/a//b/") == ["a", "b"]
    assert split_path("") == []
    assert split_path("///") == []


def test_resolve(drive):
    drive.folder("1", "a")
    drive.folder("2", "b", "1")
    assert resolve_path("a/b").as_dict() == {"a": "1", "b": "2"}
    assert resolve_path("a/c").as_dict() == {"a": "1", "c": None}
    assert resolve_path("a/b").folder_id == "2"
    assert resolve_path("a/c").folder_id is None


def test_resolve_fetches_index_once(tree):
    resolve_path("projects/2024/missing/deeper")
    assert tree.folder_listings == 1
    resolve_path("projects/2024")
    assert tree.folder_listings == 2


def test_resolve_is_idempotent(tree):
    for path in ["projects/2024", "projects/nothing", "docs", "nothing/2024"]:
        assert resolve_path(path) == resolve_path(path)


def test_resolve_case_insensitive(tree):
    assert find_folder("docs") == "f-docs"
    assert find_folder("PROJECTS/2024") == "f-2024"


def test_resolve_slashes(tree):
    assert find_folder("/projects//archive/") == "f-archive"


def test_resolve_root_eligible(drive):
    # the parent of a shared drive's top level folder is the drive, which is not listed as a folder
    drive.folder("shared", "Shared", "drive-not-a-folder")
    drive.folder("sub", "sub", "shared")
    assert find_folder("Shared/sub") == "sub"


def test_resolve_not_at_root(tree):
    # archive exists, but inside projects
    assert find_folder("archive") is None
    assert find_folder("2024") is None


def test_resolve_stops_at_first_missing_segment(tree):
    # 'docs' exists at the top level, but not inside 'missing', and should not be found there
    resolution = resolve_path("missing/docs")
    assert [(s.name, s.id) for s in resolution.segments] == [("missing", None), ("docs", None)]
    assert resolution.first_unresolved.name == "missing"
    assert not resolution.complete


def test_resolve_repeated_names(drive):
    drive.folder("x1", "x")
    drive.folder("x2", "x", "x1")
    resolution = resolve_path("x/x")
    assert [s.id for s in resolution.segments] == ["x1", "x2"]
    assert resolve_path("x/x/x").folder_id is None


def test_resolve_multiple_parents(drive):
    drive.folder("p1", "one")
    drive.folder("p2", "two")
    drive.folder("shared", "shared", "p1", "p2")
    assert find_folder("one/shared") == "shared"
    assert find_folder("two/shared") == "shared"


def test_resolve_root_with_parent_in_index(drive):
    # a folder is only root eligible if none of its parents are known folders
    drive.folder("p1", "one")
    drive.folder("both", "both", "outside", "p1")
    assert find_folder("both") is None
    assert find_folder("one/both") == "both"


def test_resolve_empty_path(drive):
    resolution = resolve_path("/")
    assert resolution.segments == []
    assert resolution.folder_id is None
    assert not folder_exists("")
    assert drive.queries == []


def test_folder_exists(tree):
    assert folder_exists("projects")
    assert folder_exists("projects/2024")
    assert not folder_exists("projects/2025")
    # files are not folders
    assert not folder_exists("projects/2024/report.pdf")


def test_find_directory_with_index():
    index = {
        "1": DirectoryRecord(id="1", name="a"),
        "2": DirectoryRecord(id="2", name="B", parents=("1",)),
    }
    assert find_directory("a", None, index) == "1"
    assert find_directory("b", "1", index) == "2"
    assert find_directory("b", None, index) is None
    assert resolve_path("a/b", index=index).folder_id == "2"


def test_duplicate_names_first(drive):
    drive.folder("1", "a")
    drive.folder("2", "dup", "1")
    drive.folder("3", "Dup", "1")
    assert find_folder("a/dup") == "2"


def test_duplicate_names_error(drive, settings):
    settings.duplicate_names = DuplicateNames.error
    drive.folder("1", "a")
    drive.folder("2", "dup", "1")
    drive.folder("3", "Dup", "1")
    drive.folder("4", "unique", "1")
    assert find_folder("a/unique") == "4"
    with pytest.raises(AmbiguousPathError, match="2 folders named 'dup'"):
        find_folder("a/dup")
