import pytest
import responses

from drivepath.config import DuplicateNames, get_settings
from drivepath.connections import CONNECTIONS, close_drive, set_authorization_token
from tests.tools import API_URL, TEST_TOKEN, FakeDrive


@pytest.fixture(autouse=True)
def settings():
    """Point the settings at the fake drive, and restore them afterwards"""
    settings = get_settings()
    original = settings.model_dump()
    settings.api_url = API_URL
    settings.page_size = 100
    settings.all_drives = True
    settings.duplicate_names = DuplicateNames.first
    settings.authorization_token = None
    set_authorization_token(TEST_TOKEN)
    yield settings
    close_drive()
    CONNECTIONS.token = None
    for key, value in original.items():
        setattr(settings, key, value)


@pytest.fixture()
def drive():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield FakeDrive(rsps)


@pytest.fixture()
def tree(drive):
    """
    projects/             (f-projects)
      2024/               (f-2024)
        report.pdf
        Notes.txt
      archive/            (f-archive)
    Docs/                 (f-docs, parent is a shared drive that is not a folder)
      manual.md
    top.txt
    """
    drive.folder("f-projects", "projects")
    drive.folder("f-2024", "2024", "f-projects")
    drive.folder("f-archive", "archive", "f-projects")
    drive.folder("f-docs", "Docs", "shared-drive-1")
    drive.file("file-report", "report.pdf", "f-2024", mime_type="application/pdf")
    drive.file("file-notes", "Notes.txt", "f-2024")
    drive.file("file-manual", "manual.md", "f-docs")
    drive.file("file-top", "top.txt")
    return drive
