"""Tests for the rename pipeline.

Covers:
- End-to-end scenarios on disk (image + sidecar, live image, distinct stems,
  lone sidecar, missing timestamp)
- Skipped groups report every member
- One group's failure never affects another
- Prefetched timestamps bypass the provider
- Run summary totals
"""

from pathlib import Path

import pytest

from mediastamp.core.grouper import classify_records
from mediastamp.core.notifier import RecordingNotifier
from mediastamp.core.pipeline import governing_record, process_groups, run_rename
from mediastamp.errors import AmbiguousGroup, NoPrimaryFile
from mediastamp.fs.operations import (
    DryRunFileSystem,
    RealFileSystem,
    RecordingFileSystem,
)
from mediastamp.metadata.base import StaticProvider
from mediastamp.models.rename import OutcomeKind
from tests.helpers.factories import captured, records, touch_all


def names(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


def test_image_with_sidecar_renamed_together(tmp_path: Path) -> None:
    jpg, _ = touch_all(tmp_path, ["IMG_01.JPG", "IMG_01.XMP"])
    provider = StaticProvider({jpg: captured("2021-10-10 12:34:56")})

    summary = run_rename(tmp_path, provider, RealFileSystem(), RecordingNotifier())

    assert names(tmp_path) == ["2021-10-10_12.34.56.JPG", "2021-10-10_12.34.56.XMP"]
    assert summary.group_count == 1
    assert summary.file_count == 2
    # Only the governing file is asked for metadata.
    assert provider.calls == [jpg]


def test_live_image_uses_the_image_timestamp(tmp_path: Path) -> None:
    jpg, mov = touch_all(tmp_path, ["A.JPG", "A.MOV"])
    provider = StaticProvider(
        {
            jpg: captured("2020-05-06 07:08:09"),
            mov: captured("1999-01-01 00:00:00"),
        }
    )

    run_rename(tmp_path, provider, RealFileSystem(), RecordingNotifier())

    assert names(tmp_path) == ["2020-05-06_07.08.09.JPG", "2020-05-06_07.08.09.MOV"]
    assert provider.calls == [jpg]


def test_distinct_stems_are_renamed_independently(tmp_path: Path) -> None:
    a, b = touch_all(tmp_path, ["A.JPG", "B.JPG"])
    provider = StaticProvider(
        {a: captured("2021-01-01 10:00:00"), b: captured("2021-01-01 11:00:00")}
    )

    summary = run_rename(tmp_path, provider, RealFileSystem(), RecordingNotifier())

    assert names(tmp_path) == ["2021-01-01_10.00.00.JPG", "2021-01-01_11.00.00.JPG"]
    assert (tmp_path / "2021-01-01_10.00.00.JPG").read_text() == "A.JPG"
    assert summary.group_count == 2


def test_lone_sidecar_is_reported_unsupported(tmp_path: Path) -> None:
    (aae,) = touch_all(tmp_path, ["IMG_02.AAE"])
    provider = StaticProvider()
    notifier = RecordingNotifier()

    summary = run_rename(tmp_path, provider, RealFileSystem(), notifier)

    assert names(tmp_path) == ["IMG_02.AAE"]
    assert notifier.kinds() == [OutcomeKind.UNSUPPORTED]
    assert notifier.events[0].source == aae
    assert provider.calls == []
    assert summary.by_outcome == {OutcomeKind.UNSUPPORTED: 1}


def test_uncertain_group_reports_every_member() -> None:
    groups = classify_records(records("A.JPG", "A.HEIC", "A.xmp"))
    notifier = RecordingNotifier()
    fs = RecordingFileSystem()
    provider = StaticProvider()

    process_groups(groups, provider, fs, notifier)

    assert notifier.kinds() == [OutcomeKind.UNCERTAIN] * 3
    assert [e.source.name for e in notifier.events] == ["A.JPG", "A.HEIC", "A.xmp"]
    assert fs.renamed == []
    assert provider.calls == []


def test_missing_timestamp_reports_no_timestamp(tmp_path: Path) -> None:
    touch_all(tmp_path, ["clip.MOV", "clip.xmp"])
    notifier = RecordingNotifier()

    summary = run_rename(tmp_path, StaticProvider(), RealFileSystem(), notifier)

    assert names(tmp_path) == ["clip.MOV", "clip.xmp"]
    assert notifier.kinds() == [OutcomeKind.NO_TIMESTAMP] * 2
    assert summary.group_count == 0


def test_failed_group_does_not_stop_the_run() -> None:
    files = records("A.JPG", "A.xmp", "B.JPG")
    a_jpg, a_xmp, b_jpg = files
    provider = StaticProvider(
        {
            a_jpg.path: captured("2021-01-01 10:00:00"),
            b_jpg.path: captured("2021-01-01 11:00:00"),
        }
    )
    fs = RecordingFileSystem(fail_on=[a_xmp.path])
    notifier = RecordingNotifier()

    summary = process_groups(classify_records(files), provider, fs, notifier)

    assert notifier.kinds() == [
        OutcomeKind.RENAMED,
        OutcomeKind.ERROR,
        OutcomeKind.ROLLED_BACK,
        OutcomeKind.RENAMED,
    ]
    assert summary.group_count == 1
    assert summary.file_count == 1
    assert summary.failed


def test_prefetched_timestamps_skip_the_provider() -> None:
    groups = classify_records(records("A.JPG"))
    provider = StaticProvider()
    fs = RecordingFileSystem()

    process_groups(
        groups,
        provider,
        fs,
        RecordingNotifier(),
        prefetched={"A": captured("2021-10-10 12:34:56")},
    )

    assert provider.calls == []
    assert [dst.name for _, dst in fs.renamed] == ["2021-10-10_12.34.56.JPG"]


def test_dry_run_leaves_files_untouched(tmp_path: Path) -> None:
    jpg, _ = touch_all(tmp_path, ["A.JPG", "A.xmp"])
    provider = StaticProvider({jpg: captured("2021-10-10 12:34:56")})
    notifier = RecordingNotifier()

    summary = run_rename(tmp_path, provider, DryRunFileSystem(), notifier)

    assert names(tmp_path) == ["A.JPG", "A.xmp"]
    assert notifier.kinds() == [OutcomeKind.RENAMED] * 2
    assert summary.file_count == 2


def test_second_run_without_overwrite_keeps_organized_tree(tmp_path: Path) -> None:
    jpg, _ = touch_all(tmp_path, ["IMG_01.JPG", "IMG_01.XMP"])
    stamp = captured("2021-10-10 12:34:56")
    fs = RealFileSystem(overwrite=False)
    run_rename(tmp_path, StaticProvider({jpg: stamp}), fs, RecordingNotifier())
    renamed = tmp_path / "2021-10-10_12.34.56.JPG"
    notifier = RecordingNotifier()

    summary = run_rename(tmp_path, StaticProvider({renamed: stamp}), fs, notifier)

    assert names(tmp_path) == ["2021-10-10_12.34.56.JPG", "2021-10-10_12.34.56.XMP"]
    assert (tmp_path / "2021-10-10_12.34.56.XMP").read_text() == "IMG_01.XMP"
    assert notifier.kinds() == [OutcomeKind.RENAMED] * 2
    assert not summary.failed
    assert summary.file_count == 2


def test_governing_record_rejects_unrenamable_groups() -> None:
    uncertain, unsupported, image = classify_records(
        records("A.JPG", "A.png", "B.AAE", "C.JPG")
    )
    with pytest.raises(AmbiguousGroup):
        governing_record(uncertain)
    with pytest.raises(NoPrimaryFile):
        governing_record(unsupported)
    assert governing_record(image).path.name == "C.JPG"


def test_run_rename_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        run_rename(
            tmp_path / "missing",
            StaticProvider(),
            RealFileSystem(),
            RecordingNotifier(),
        )
