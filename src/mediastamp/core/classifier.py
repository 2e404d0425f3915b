"""Path classifier.

Turns a file path into a FileRecord: stem, extension and media category.
"""

from pathlib import Path

from mediastamp.core.extensions import category_for
from mediastamp.models.core import FileRecord


def split_name(path: Path) -> tuple[str, str]:
    """Split a file name into (stem, extension) at the last dot.

    The extension keeps its original case and has no leading dot. A name
    without a dot, or a dot-file such as ``.DS_Store``, has an empty extension.
    """
    suffix = path.suffix
    return path.stem, suffix[1:] if suffix else ""


def classify_path(path: Path, base_dir: Path) -> FileRecord:
    """Build the FileRecord for *path*.

    Args:
        path: Path of a regular file. Made absolute if it is not already.
        base_dir: Root the file was collected from, used for the relative path
            shown to users.

    Returns:
        FileRecord: The immutable record for this file.
    """
    path = path.absolute()
    stem, extension = split_name(path)
    try:
        relative = path.relative_to(base_dir.absolute())
    except ValueError:
        relative = path
    if relative == Path("."):
        # A single file collected on its own is displayed by name.
        relative = Path(path.name)
    return FileRecord(
        path=path,
        relative_path=relative,
        stem=stem,
        extension=extension,
        category=category_for(extension),
    )
