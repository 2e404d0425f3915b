"""Utility modules for mediastamp."""

from mediastamp.utils.config import (
    get_exiftool_command,
    resolve_setting,
    set_exiftool_command,
)
from mediastamp.utils.json import DateTimeEncoder, dumps

__all__ = [
    "DateTimeEncoder",
    "dumps",
    "get_exiftool_command",
    "resolve_setting",
    "set_exiftool_command",
]
