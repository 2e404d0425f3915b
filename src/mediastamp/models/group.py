"""Models for file groups and their classification.

This module defines the bucket of same-stem files produced by the grouper and
the five group variants produced by the group classifier.
- FileGroup is the raw bucket: primary files (images, videos) and secondary
  files (sidecars, edit metadata, anything else).
- GroupVariant is a closed union of five frozen models. Each carries only the
  fields that make sense for its case, discriminated by ``kind``.

Design:
- Only Image, Video and LiveImage groups are renamable. Their governing file is
  the one whose timestamp names the whole group.
- Uncertain and Unsupported groups are reported, never renamed.
"""

from typing import Annotated, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from mediastamp.models.core import FileRecord, MediaCategory

__all__: list[str] = [
    "FileGroup",
    "ImageGroup",
    "VideoGroup",
    "LiveImageGroup",
    "UncertainGroup",
    "UnsupportedGroup",
    "GroupVariant",
    "RenamableGroup",
]


class FileGroup(BaseModel):
    """Files sharing one stem, split into primary and secondary sets.

    Both sets keep the order in which files were seen.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    """The shared stem."""

    primary: Tuple[FileRecord, ...] = ()
    """Image and video files."""

    secondary: Tuple[FileRecord, ...] = ()
    """Every other file with this stem."""

    def members(self) -> List[FileRecord]:
        """All records, primary first."""
        return [*self.primary, *self.secondary]

    def count(self, category: MediaCategory) -> int:
        """Number of primary files in *category*."""
        return sum(1 for record in self.primary if record.category == category)


class _Variant(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    config: Tuple[FileRecord, ...] = ()
    """Secondary files that follow the primary file's new name."""


class ImageGroup(_Variant):
    """Exactly one image, any number of config files."""

    kind: Literal["Image"] = "Image"
    image: FileRecord

    @property
    def governing(self) -> FileRecord:
        return self.image

    def rename_members(self) -> List[FileRecord]:
        return [self.image, *self.config]

    def members(self) -> List[FileRecord]:
        return self.rename_members()


class VideoGroup(_Variant):
    """Exactly one video, any number of config files."""

    kind: Literal["Video"] = "Video"
    video: FileRecord

    @property
    def governing(self) -> FileRecord:
        return self.video

    def rename_members(self) -> List[FileRecord]:
        return [self.video, *self.config]

    def members(self) -> List[FileRecord]:
        return self.rename_members()


class LiveImageGroup(_Variant):
    """A still image and a video captured together (e.g. a live photo).

    The image's timestamp names both files.
    """

    kind: Literal["LiveImage"] = "LiveImage"
    image: FileRecord
    video: FileRecord

    @property
    def governing(self) -> FileRecord:
        return self.image

    def rename_members(self) -> List[FileRecord]:
        return [self.image, self.video, *self.config]

    def members(self) -> List[FileRecord]:
        return self.rename_members()


class UncertainGroup(_Variant):
    """More than one plausible primary file; left for human review."""

    kind: Literal["Uncertain"] = "Uncertain"
    primary: Tuple[FileRecord, ...]

    def members(self) -> List[FileRecord]:
        return [*self.primary, *self.config]


class UnsupportedGroup(_Variant):
    """Secondary files with no primary sibling."""

    kind: Literal["Unsupported"] = "Unsupported"

    def members(self) -> List[FileRecord]:
        return list(self.config)


RenamableGroup = Union[ImageGroup, VideoGroup, LiveImageGroup]

GroupVariant = Annotated[
    Union[ImageGroup, VideoGroup, LiveImageGroup, UncertainGroup, UnsupportedGroup],
    Field(discriminator="kind"),
]
