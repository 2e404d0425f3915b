"""JSON serialization helpers for mediastamp.

This module provides helpers for serializing objects to JSON, especially for
types not natively supported by the standard library (e.g., datetime,
pathlib.Path).
- Used for the ``--json`` output of the CLI (groups and rename events).
- Ensures that datetime objects are stored in ISO 8601 format.
- Ensures Path objects are serialized as strings.
"""

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Self


class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder for mediastamp.

    Handles serialization of datetime, Path and Enum objects.
    """

    def default(self: Self, obj: object) -> Any:  # noqa: ANN401
        """Convert objects to JSON-serializable format.

        Args:
            obj: Object to serialize (may be datetime, Path, or other types)

        Returns:
            JSON-serializable representation of the object.
            - datetime: ISO 8601 string
            - Path: string
            - Enum: its value
            - Otherwise: falls back to base class
        """
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Path):
            return str(obj)
        if isinstance(obj, Enum):
            return obj.value
        # Let the base class default method handle it or raise TypeError
        return super().default(obj)


def dumps(obj: Any, **kwargs: Any) -> str:  # noqa: ANN401
    """``json.dumps`` with DateTimeEncoder and two-space indentation."""
    kwargs.setdefault("indent", 2)
    return json.dumps(obj, cls=DateTimeEncoder, **kwargs)
