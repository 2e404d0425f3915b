"""Tests for the extension policy and the path classifier.

Covers:
- Fixed image/video extension sets, matched case-insensitively
- Category mapping for known, unknown and missing extensions
- Stem/extension splitting, including dot-files and multi-dot names
- Relative path fallback when a file is outside the base directory
"""

from pathlib import Path

import pytest

from mediastamp.core.classifier import classify_path, split_name
from mediastamp.core.extensions import (
    IMAGE_EXTENSIONS,
    VIDEO_EXTENSIONS,
    category_for,
    is_image,
    is_primary,
    is_video,
)
from mediastamp.models.core import MediaCategory
from tests.helpers.factories import abs_path


@pytest.mark.parametrize("ext", ["jpg", "JPG", "Jpeg", "heic", "CR3", "dng", ".png"])
def test_image_extensions_case_insensitive(ext: str) -> None:
    assert is_image(ext)
    assert not is_video(ext)
    assert is_primary(ext)
    assert category_for(ext) == MediaCategory.IMAGE


@pytest.mark.parametrize("ext", ["mov", "MOV", "mp4", "M4V", "avi", "mpg"])
def test_video_extensions_case_insensitive(ext: str) -> None:
    assert is_video(ext)
    assert not is_image(ext)
    assert category_for(ext) == MediaCategory.VIDEO


@pytest.mark.parametrize("ext", ["xmp", "AAE", "json", "txt", "", "mkv", "gif"])
def test_other_extensions_are_secondary(ext: str) -> None:
    assert not is_primary(ext)
    assert category_for(ext) == MediaCategory.OTHER


def test_extension_sets_are_disjoint() -> None:
    assert not IMAGE_EXTENSIONS & VIDEO_EXTENSIONS
    assert len(IMAGE_EXTENSIONS) == 16
    assert len(VIDEO_EXTENSIONS) == 5


@pytest.mark.parametrize(
    ("name", "stem", "ext"),
    [
        ("IMG_01.JPG", "IMG_01", "JPG"),
        ("IMG_01.JPG.xmp", "IMG_01.JPG", "xmp"),
        ("README", "README", ""),
        (".DS_Store", ".DS_Store", ""),
        ("archive.tar.gz", "archive.tar", "gz"),
    ],
)
def test_split_name(name: str, stem: str, ext: str) -> None:
    assert split_name(Path(name)) == (stem, ext)


def test_classify_path_builds_record() -> None:
    base = abs_path("/photos")
    record = classify_path(base / "2021" / "IMG_01.JPG", base)

    assert record.path == base / "2021" / "IMG_01.JPG"
    assert record.relative_path == Path("2021") / "IMG_01.JPG"
    assert record.stem == "IMG_01"
    assert record.extension == "JPG"
    assert record.category == MediaCategory.IMAGE
    assert record.is_primary


def test_classify_path_without_extension_is_other() -> None:
    base = abs_path("/photos")
    record = classify_path(base / "notes", base)
    assert record.extension == ""
    assert record.category == MediaCategory.OTHER
    assert not record.is_primary


def test_classify_path_outside_base_keeps_absolute_relative_path() -> None:
    record = classify_path(abs_path("/elsewhere/IMG_01.JPG"), abs_path("/photos"))
    assert record.relative_path == abs_path("/elsewhere/IMG_01.JPG")


def test_classify_single_file_shows_its_name() -> None:
    path = abs_path("/photos/IMG_01.JPG")
    record = classify_path(path, path)
    assert record.relative_path == Path("IMG_01.JPG")
