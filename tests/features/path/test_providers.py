"""Tests for host bridges: local files, zip archives and custom providers."""

import zipfile
from collections.abc import Iterator
from pathlib import Path, PurePosixPath

import pytest
from pytest_mock import MockerFixture

from lexpath.features.path import (
    PathString,
    register_filesystem_provider,
    to_path_string,
    unregister_filesystem_provider,
    zip_filesystem_uri,
)
from lexpath.features.path.adapters.providers import HostPath


@pytest.fixture
def archive(tmp_path: Path) -> Path:
    """Create a small zip archive with one nested member."""

    archive_path = tmp_path / "bundle.zip"
    with zipfile.ZipFile(archive_path, "w") as zf:
        zf.writestr("res/values/strings.xml", "<resources/>")
    return archive_path


@pytest.fixture
def memory_scheme() -> Iterator[str]:
    """Ensure the ``mem`` scheme is unregistered after each test."""

    yield "mem"
    _ = unregister_filesystem_provider("mem")


def test_to_file_for_local_paths() -> None:
    assert PathString("/a/b", "file:///").to_file() == Path("/a/b")


def test_to_file_for_other_schemes_is_none() -> None:
    assert PathString("/a", "mem:/").to_file() is None
    assert PathString("/a", "zip:file:///tmp/x.zip!/").to_file() is None


def test_to_path_for_local_paths() -> None:
    assert PathString("/a/b", "file:///").to_path() == Path("/a/b")


def test_to_path_without_provider_is_none() -> None:
    assert PathString("/a", "unknown:/").to_path() is None


def test_registered_provider_is_used(memory_scheme: str, mocker: MockerFixture) -> None:
    provider = mocker.Mock(return_value=PurePosixPath("/mem/a"))
    register_filesystem_provider(memory_scheme, provider)

    result = PathString("/a", "mem:/").to_path()

    assert result == PurePosixPath("/mem/a")
    provider.assert_called_once_with("mem:/", "/a")


def test_provider_failures_propagate(memory_scheme: str) -> None:
    def failing_provider(filesystem_uri: str, raw_path: str) -> HostPath:
        raise PermissionError(f"denied: {filesystem_uri}{raw_path}")

    register_filesystem_provider(memory_scheme, failing_provider)

    with pytest.raises(PermissionError, match="denied"):
        _ = PathString("/a", "mem:/").to_path()


def test_unregister_reports_missing_provider(memory_scheme: str) -> None:
    assert unregister_filesystem_provider(memory_scheme) is False


def test_zip_provider_reads_archive_members(archive: Path) -> None:
    value = PathString("/res/values/strings.xml", zip_filesystem_uri(archive))

    handle = value.to_path()

    assert isinstance(handle, zipfile.Path)
    assert handle.read_text() == "<resources/>"


def test_zip_provider_missing_archive_raises(tmp_path: Path) -> None:
    value = PathString("/a", zip_filesystem_uri(tmp_path / "missing.zip"))

    with pytest.raises(FileNotFoundError):
        _ = value.to_path()


def test_zip_filesystem_uri_format(archive: Path) -> None:
    uri = zip_filesystem_uri(archive)
    assert uri.startswith("zip:file:")
    assert uri.endswith("!/")
    assert PathString("/a", uri).scheme == "zip"


def test_to_path_string_from_zip_member(archive: Path) -> None:
    member = zipfile.Path(archive, at="res/values/strings.xml")

    value = to_path_string(member)

    assert value.raw_path == "/res/values/strings.xml"
    assert value.filesystem_uri == zip_filesystem_uri(archive)
    handle = value.to_path()
    assert isinstance(handle, zipfile.Path)
    assert handle.read_text() == "<resources/>"


def test_to_path_string_from_local_path(tmp_path: Path) -> None:
    value = to_path_string(tmp_path / "out")
    assert value == PathString(str(tmp_path / "out"))
    assert value.to_file() == tmp_path / "out"
