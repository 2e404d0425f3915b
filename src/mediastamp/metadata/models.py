"""Data models for embedded media metadata.

ExifMetadata is the decoded record exiftool returns for one file. Only the
fields mediastamp reads are declared; everything else in the JSON is ignored.

Timestamps:
- exiftool reports ``YYYY:MM:DD HH:MM:SS`` optionally followed by sub-seconds
  and a timezone offset. Only the first 19 characters are parsed.
- "Date/time original" is normally written without a timezone and already
  holds the local time where the media was captured. "Creation date" carries
  an offset but its date and time are local too. Dropping the suffix therefore
  keeps the local capture time, which is what the name should show.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mediastamp.models.core import TimestampCandidates

EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"
EXIF_DATE_LENGTH = 19


def parse_exif_date(value: Any) -> Optional[datetime]:
    """Parse an exiftool timestamp, ignoring sub-seconds and timezone.

    Returns:
        A naive datetime, or None if *value* is missing or unparseable.
    """
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value[:EXIF_DATE_LENGTH], EXIF_DATE_FORMAT)
    except ValueError:
        return None


class ExifMetadata(BaseModel):
    """Metadata exiftool reported for a single file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    source_file: str = Field(alias="SourceFile")
    file_name: str = Field(alias="FileName")
    file_size: Optional[str] = Field(default=None, alias="FileSize")
    file_type: Optional[str] = Field(default=None, alias="FileType")
    file_type_extension: Optional[str] = Field(default=None, alias="FileTypeExtension")
    image_width: Optional[int] = Field(default=None, alias="ImageWidth")
    date_time_original: Optional[datetime] = Field(
        default=None, alias="DateTimeOriginal"
    )
    creation_date: Optional[datetime] = Field(default=None, alias="CreationDate")

    @field_validator("date_time_original", "creation_date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Optional[datetime]:
        return parse_exif_date(value)

    @field_validator("file_size", mode="before")
    @classmethod
    def _stringify_size(cls, value: Any) -> Optional[str]:
        # exiftool -n reports a bare byte count
        return None if value is None else str(value)

    @field_validator("image_width", mode="before")
    @classmethod
    def _parse_width(cls, value: Any) -> Optional[int]:
        if isinstance(value, int) or value is None:
            return value
        try:
            return int(str(value))
        except ValueError:
            return None

    def timestamps(self) -> TimestampCandidates:
        """Capture and creation time as TimestampCandidates."""
        return TimestampCandidates(
            capture=self.date_time_original, creation=self.creation_date
        )
