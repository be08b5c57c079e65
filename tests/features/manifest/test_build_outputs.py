"""Tests for build-output manifests persisted as output.json."""

import io
import json
import logging
from pathlib import Path

import pytest

from lexpath.features.manifest import (
    BuildOutput,
    BuildOutputManifest,
    ManifestFormatError,
    metadata_file,
)
from lexpath.features.path import PathString, to_path_string

SAMPLE_MANIFEST = json.dumps(
    [
        {
            "outputType": {"type": "MERGED_MANIFESTS"},
            "apkInfo": {"type": "MAIN", "splits": [], "versionCode": 12},
            "path": "/foo/bar/AndroidManifest.xml",
            "properties": {"packageId": "com.android.tests.basic.debug", "split": ""},
        },
        {
            "outputType": {"type": "DENSITY_OR_LANGUAGE_PACKAGED_SPLIT"},
            "path": "/foo/bar/SplitAware-mdpi-debug-unsigned.apk",
            "properties": {},
        },
        {
            "outputType": {"type": "DENSITY_OR_LANGUAGE_PACKAGED_SPLIT"},
            "path": "/foo/bar/SplitAware-xhdpi-debug-unsigned.apk",
            "properties": {},
        },
        {
            "outputType": {"type": "DENSITY_OR_LANGUAGE_PACKAGED_SPLIT"},
            "path": "/foo/bar/SplitAware-hdpi-debug-unsigned.apk",
            "properties": {},
        },
    ]
)


def test_metadata_file_name(tmp_path: Path) -> None:
    outputs = metadata_file(tmp_path)
    assert outputs.name == "output.json"
    assert outputs.parent == tmp_path


def test_load_filters_by_type() -> None:
    base = PathString("/foo")

    splits = BuildOutputManifest.load(base, SAMPLE_MANIFEST, ["DENSITY_OR_LANGUAGE_PACKAGED_SPLIT"])
    merged = BuildOutputManifest.load(base, io.StringIO(SAMPLE_MANIFEST), ["MERGED_MANIFESTS"])
    everything = BuildOutputManifest.load(base, SAMPLE_MANIFEST)

    assert len(splits) == 3
    assert len(merged) == 1
    assert len(everything) == 4
    manifest_output = merged.element("MERGED_MANIFESTS")
    assert manifest_output is not None
    assert manifest_output.path == PathString("/foo/bar/AndroidManifest.xml")
    assert manifest_output.properties["packageId"] == "com.android.tests.basic.debug"


def test_persist_stores_descendants_relative_to_base() -> None:
    base = PathString("/project/build")
    manifest = BuildOutputManifest(
        [
            BuildOutput("APK", PathString("/project/build/outputs/app.apk"), {"abi": "x86"}),
            BuildOutput("MAPPING", PathString("/elsewhere/mapping.txt")),
            BuildOutput("SOURCES", PathString("/project/src")),
        ]
    )

    records = json.loads(manifest.persist(base))

    assert records[0] == {
        "outputType": {"type": "APK"},
        "path": "outputs/app.apk",
        "properties": {"abi": "x86"},
    }
    assert records[1]["path"] == "/elsewhere/mapping.txt"
    assert records[2]["path"] == "/project/src"


def test_persist_then_load_restores_outputs() -> None:
    base = PathString("/project/build")
    manifest = BuildOutputManifest(
        [
            BuildOutput("APK", PathString("/project/build/outputs/app.apk"), {"abi": "x86"}),
            BuildOutput("MAPPING", PathString("/elsewhere/mapping.txt")),
            BuildOutput("RES", PathString("/res/a.xml", "zip:file:///tmp/r.zip!/")),
        ]
    )

    loaded = BuildOutputManifest.load(base, manifest.persist(base))

    assert loaded.outputs == manifest.outputs


def test_relocated_folder_resolves_against_new_base() -> None:
    manifest = BuildOutputManifest([BuildOutput("APK", PathString("/old/build/app.apk"))])

    loaded = BuildOutputManifest.load(PathString("/new/build"), manifest.persist(PathString("/old/build")))

    assert loaded.outputs[0].path == PathString("/new/build/app.apk")


@pytest.mark.parametrize(
    "document",
    [
        "not json",
        '{"path": "a"}',
        '[1]',
        '[{"path": "a"}]',
        '[{"outputType": {}, "path": "a"}]',
        '[{"outputType": {"type": "APK"}}]',
        '[{"outputType": {"type": "APK"}, "path": "a", "properties": []}]',
    ],
)
def test_load_rejects_malformed_documents(document: str) -> None:
    with pytest.raises(ManifestFormatError):
        _ = BuildOutputManifest.load(PathString("/base"), document)


def test_save_and_from_folder(tmp_path: Path) -> None:
    apk = to_path_string(tmp_path / "outputs" / "app.apk")
    manifest = BuildOutputManifest([BuildOutput("APK", apk, {"versionCode": "12"})])

    written = manifest.save(tmp_path)
    loaded = BuildOutputManifest.from_folder(tmp_path)

    assert written == metadata_file(tmp_path)
    assert json.loads(written.read_text(encoding="utf-8"))[0]["path"] == "outputs/app.apk"
    assert loaded.outputs == manifest.outputs
    assert loaded.by_type("APK")[0].properties == {"versionCode": "12"}
    assert BuildOutputManifest.from_folder(tmp_path, ["OTHER"]).outputs == []


def test_from_folder_without_manifest_is_empty(tmp_path: Path) -> None:
    manifest = BuildOutputManifest.from_folder(tmp_path)
    assert len(manifest) == 0
    assert manifest.element("APK") is None


def test_from_folder_with_broken_manifest_raises(tmp_path: Path) -> None:
    _ = metadata_file(tmp_path).write_text("{", encoding="utf-8")
    with pytest.raises(ManifestFormatError):
        _ = BuildOutputManifest.from_folder(tmp_path)


def test_repeated_separators_stay_below_base() -> None:
    base = PathString("/out")
    manifest = BuildOutputManifest([BuildOutput("APK", PathString("/out//app.apk"))])

    records = json.loads(manifest.persist(base))
    loaded = BuildOutputManifest.load(base, manifest.persist(base))

    assert records[0]["path"] == "app.apk"
    assert loaded.outputs[0].path == PathString("/out/app.apk")
    assert loaded.outputs[0].path.normalize() == PathString("/out//app.apk").normalize()


def test_relative_outputs_load_resolved_against_base() -> None:
    base = PathString("/out")
    manifest = BuildOutputManifest([BuildOutput("APK", PathString("app.apk"))])

    records = json.loads(manifest.persist(base))
    loaded = BuildOutputManifest.load(base, manifest.persist(base))

    assert records[0]["path"] == "app.apk"
    assert loaded.outputs[0].path == PathString("/out/app.apk")


def test_manifest_events_carry_display_base(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lexpath")
    folder = tmp_path / "build"

    _ = BuildOutputManifest([BuildOutput("APK", PathString("app.apk"))]).save(folder)
    _ = BuildOutputManifest.from_folder(folder)

    events = {getattr(record, "path_event", None): record for record in caplog.records}
    for event in ("manifest.save", "manifest.load"):
        record = events[event]
        assert getattr(record, "base_path") == str(tmp_path)
        assert getattr(record, "manifest_path") == str(folder / "output.json")
