"""Metadata providers for mediastamp."""

from mediastamp.metadata.base import MetadataProvider, StaticProvider
from mediastamp.metadata.exiftool import ExiftoolProvider
from mediastamp.metadata.models import ExifMetadata, parse_exif_date

__all__ = [
    "MetadataProvider",
    "StaticProvider",
    "ExiftoolProvider",
    "ExifMetadata",
    "parse_exif_date",
]
