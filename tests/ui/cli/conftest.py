"""Shared fixtures for CLI tests."""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


@pytest.fixture
def mock_config(mocker: MockerFixture) -> MagicMock:
    """Patch configuration loading with default values."""

    config = mocker.patch("lexpath.ui.cli.args.parser.Config")
    loaded = config.load.return_value
    loaded.default_filesystem_uri = None
    loaded.log_file = None
    loaded.manifest_indent = 2
    return config


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep tests from attaching file handlers to the shared logger."""

    return mocker.patch("lexpath.ui.cli.args.parser.setup_logger")
