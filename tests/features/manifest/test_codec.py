"""Tests for the path record codec."""

import pytest

from lexpath.features.manifest import ManifestFormatError, decode_path, encode_path
from lexpath.features.path import DEFAULT_FILESYSTEM_URI, PathString


def test_encode_default_filesystem_stores_portable_path_only() -> None:
    assert encode_path(PathString("C:\\out\\app.apk")) == {"path": "C:/out/app.apk"}


def test_encode_other_filesystem_records_uri() -> None:
    record = encode_path(PathString("/res/a.xml", "zip:file:///tmp/b.zip!/"))
    assert record == {"path": "/res/a.xml", "filesystem": "zip:file:///tmp/b.zip!/"}


def test_decode_reparses_record() -> None:
    value = decode_path({"path": "/res/a.xml", "filesystem": "mem:/"})
    assert value == PathString("/res/a.xml", "mem:/")


def test_decode_defaults_to_local_filesystem() -> None:
    assert decode_path({"path": "a/b"}).filesystem_uri == DEFAULT_FILESYSTEM_URI


@pytest.mark.parametrize("text", ["/a/b", "a\\b", "C:\\x\\y\\", "", "../z"])
def test_decode_of_encode_matches_portable_form(text: str) -> None:
    value = PathString(text, "mem:/")
    assert decode_path(encode_path(value)) == PathString(value.portable_path, "mem:/")


@pytest.mark.parametrize(
    "record",
    [
        {},
        {"path": 3},
        {"path": "a", "filesystem": None},
    ],
)
def test_decode_rejects_malformed_records(record: dict[str, object]) -> None:
    with pytest.raises(ManifestFormatError):
        _ = decode_path(record)
