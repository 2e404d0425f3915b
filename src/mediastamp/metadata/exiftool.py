"""exiftool-backed metadata provider.

Runs ``exiftool -j <file>`` once per file and decodes the single JSON object it
prints. exiftool wraps its output in a JSON array even for one file; the
wrapper is stripped line by line before decoding.

Output is read as UTF-8 with undecodable bytes replaced: exiftool echoes file
names back in whatever encoding the filesystem uses.
"""

import json
import logging
import subprocess
from pathlib import Path

from pydantic import ValidationError

from mediastamp.errors import MetadataUnavailable
from mediastamp.metadata.base import MetadataProvider
from mediastamp.metadata.models import ExifMetadata
from mediastamp.models.core import TimestampCandidates

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "exiftool"


def object_from_array_of_one(data: str) -> str:
    """Extract the first JSON object from exiftool's array output.

    exiftool prints ``[{`` on the first line, then one key per line, and closes
    each object with ``}``, ``},`` or ``}]``. The array markers are dropped and
    text is accumulated until the first object closes.

    Args:
        data: Raw stdout of ``exiftool -j``.

    Returns:
        The text of the first object.

    Raises:
        MetadataUnavailable: If no complete object is found.
    """
    buffer = []
    for line in data.splitlines():
        if len(line) == 2 and line.startswith("[{"):
            line = line[1:]
        if len(line) == 2 and (line.startswith("},") or line.startswith("}]")):
            line = line[:-1]
        buffer.append(line)
        if line == "}":
            return "".join(buffer)
    raise MetadataUnavailable("exiftool output did not contain a complete object")


class ExiftoolProvider(MetadataProvider):
    """Read timestamps with the exiftool command line tool.

    Args:
        command: exiftool executable, a name on PATH or an absolute path.
    """

    def __init__(self, command: str = DEFAULT_COMMAND) -> None:
        self.command = command

    def read_metadata(self, path: Path) -> ExifMetadata:
        """Run exiftool on *path* and decode its output.

        Raises:
            MetadataUnavailable: If exiftool cannot be run, exits with an
                error, or prints something that does not decode.
        """
        try:
            result = subprocess.run(
                [self.command, "-j", str(path)],
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise MetadataUnavailable(f"Could not run {self.command}: {e}") from e

        if not result.stdout.strip():
            message = result.stderr.strip() or f"exit status {result.returncode}"
            raise MetadataUnavailable(f"{self.command} returned no data: {message}")

        text = object_from_array_of_one(result.stdout)
        try:
            return ExifMetadata.model_validate(json.loads(text))
        except (json.JSONDecodeError, ValidationError) as e:
            raise MetadataUnavailable(f"Could not decode metadata: {e}") from e

    def fetch(self, path: Path) -> TimestampCandidates:
        """Return the timestamps of *path*, or empty candidates on failure."""
        try:
            metadata = self.read_metadata(path)
        except MetadataUnavailable as e:
            logger.warning("%s -> Could not parse exif metadata: %s", path, e)
            return TimestampCandidates()
        return metadata.timestamps()
