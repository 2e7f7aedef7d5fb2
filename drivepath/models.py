from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

DriveId = Annotated[str, Field(min_length=1, title="Drive file or folder ID")]


class DirectoryRecord(BaseModel):
    """A folder as listed by the drive. Parents is empty for folders without (visible) parents."""

    model_config = ConfigDict(frozen=True)

    id: DriveId
    name: str
    parents: tuple[DriveId, ...] = ()


# Folder id -> record, rebuilt for every resolution
DirectoryIndex = dict[str, DirectoryRecord]


class DriveFile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: DriveId
    name: str
    mime_type: Annotated[str | None, Field(alias="mimeType")] = None
    file_extension: Annotated[str | None, Field(alias="fileExtension")] = None
    parents: tuple[DriveId, ...] = ()

    @property
    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE


class ResolvedSegment(BaseModel):
    name: str
    id: DriveId | None = None  # None if this segment (or one before it) could not be resolved

    @property
    def resolved(self) -> bool:
        return self.id is not None


class PathResolution(BaseModel):
    """
    The result of walking a path over the directory index.
    Segments are kept in path order, so repeated names (a/a/a) are kept apart.
    """

    path: str
    segments: list[ResolvedSegment] = []

    @property
    def complete(self) -> bool:
        """True if the path has at least one segment and every segment was resolved"""
        return bool(self.segments) and all(s.resolved for s in self.segments)

    @property
    def folder_id(self) -> str | None:
        """The id of the folder the full path points to, or None if it does not exist"""
        if not self.complete:
            return None
        return self.segments[-1].id

    @property
    def first_unresolved(self) -> ResolvedSegment | None:
        for segment in self.segments:
            if not segment.resolved:
                return segment
        return None

    def as_dict(self) -> dict[str, str | None]:
        """
        Segment name -> folder id. Note that repeated segment names collapse into one key,
        use segments if the path can contain the same name twice.
        """
        return {s.name: s.id for s in self.segments}
