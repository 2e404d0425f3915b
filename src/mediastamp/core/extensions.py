"""Extension policy for media files.

Maps a file extension to a MediaCategory. The sets are fixed and matched
case-insensitively; they are not user-configurable.
"""

from mediastamp.models.core import MediaCategory

# Still images, including the raw formats of the common camera makers.
IMAGE_EXTENSIONS = frozenset(
    {
        "cr3",
        "bmp",
        "cr2",
        "dng",
        "heic",
        "jpeg",
        "jpg",
        "nef",
        "png",
        "raf",
        "raw",
        "rw2",
        "svg",
        "tif",
        "tiff",
        "webp",
    }
)

VIDEO_EXTENSIONS = frozenset({"avi", "m4v", "mov", "mp4", "mpg"})


def _normalize(ext: str) -> str:
    return ext.lstrip(".").lower()


def is_image(ext: str) -> bool:
    """Return True if *ext* names a still image format."""
    return _normalize(ext) in IMAGE_EXTENSIONS


def is_video(ext: str) -> bool:
    """Return True if *ext* names a video format."""
    return _normalize(ext) in VIDEO_EXTENSIONS


def is_primary(ext: str) -> bool:
    """Return True if *ext* is an image or a video extension."""
    return is_image(ext) or is_video(ext)


def category_for(ext: str) -> MediaCategory:
    """Map an extension (with or without the dot) to its MediaCategory.

    Args:
        ext: File extension, any case. Empty string for files without one.

    Returns:
        IMAGE, VIDEO or OTHER.
    """
    if is_image(ext):
        return MediaCategory.IMAGE
    if is_video(ext):
        return MediaCategory.VIDEO
    return MediaCategory.OTHER
