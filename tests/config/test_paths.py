"""Tests for configuration path resolution helpers."""

from pathlib import Path

from lexpath.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root.resolve() / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "lexpath.log"


def test_default_config_path_under_repo_root(portable_repo_root: Path) -> None:
    assert default_config_path(env={}) == portable_repo_root.resolve() / "config" / "config.toml"


def test_environment_overrides_config_path(portable_repo_root: Path) -> None:
    override = portable_repo_root / "elsewhere" / "lexpath.toml"
    assert default_config_path(env={"LEXPATH_CONFIG": str(override)}) == override.resolve()


def test_blank_environment_value_is_ignored(portable_repo_root: Path) -> None:
    resolved = default_config_path(env={"LEXPATH_CONFIG": "   "})
    assert resolved == portable_repo_root.resolve() / "config" / "config.toml"


def test_explicit_path_wins(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"
    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"SOME_VAR": str(tmp_path / "env.toml")},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default.toml",
    )
    assert resolved == explicit.resolve()
