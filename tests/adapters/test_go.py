"""
Tests for the go adapter module using pytest.

Tests cover:
- SubprocessGoClient.list_std: parsing `go list std` output
- SubprocessGoClient.package_info: decoding `go list -json` output
- Failure handling: missing binary, non-zero exit, bad JSON

subprocess.run is patched at module level, as the client calls it directly.
"""

import json
import subprocess
from unittest.mock import MagicMock

import pytest

from adapters.go import SubprocessGoClient
from core.exceptions import PackageResolutionError


# ============================================================================
# Tests for SubprocessGoClient.__init__
# ============================================================================


@pytest.mark.unit
def test_subprocess_go_client_default_binary():
    assert SubprocessGoClient().go_binary == "go"


@pytest.mark.unit
def test_subprocess_go_client_custom_binary():
    assert SubprocessGoClient("/opt/go/bin/go").go_binary == "/opt/go/bin/go"


# ============================================================================
# Tests for SubprocessGoClient.list_std
# ============================================================================


@pytest.mark.unit
@pytest.mark.mock
def test_list_std_splits_lines(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.return_value = MagicMock(stdout="archive/tar\nbufio\nnet/http\n")

    result = SubprocessGoClient().list_std()

    assert result == ["archive/tar", "bufio", "net/http"]
    call_args = mock_run.call_args
    assert call_args[0][0] == ["go", "list", "std"]
    assert call_args[1]["check"] is True
    assert call_args[1]["capture_output"] is True


@pytest.mark.unit
@pytest.mark.mock
def test_list_std_ignores_blank_lines(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.return_value = MagicMock(stdout="\nbufio\r\n\n  \nio\n")

    assert SubprocessGoClient().list_std() == ["bufio", "io"]


@pytest.mark.unit
@pytest.mark.mock
def test_list_std_uses_configured_binary(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.return_value = MagicMock(stdout="")

    SubprocessGoClient("go1.22").list_std()

    assert mock_run.call_args[0][0] == ["go1.22", "list", "std"]


@pytest.mark.unit
@pytest.mark.mock
def test_list_std_missing_binary_raises(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.side_effect = FileNotFoundError("go")

    with pytest.raises(PackageResolutionError) as exc_info:
        SubprocessGoClient().list_std()

    assert "not found" in exc_info.value.message
    assert exc_info.value.import_path is None
    assert isinstance(exc_info.value.original_exception, FileNotFoundError)


@pytest.mark.unit
@pytest.mark.mock
def test_list_std_non_zero_exit_raises_with_stderr(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.side_effect = subprocess.CalledProcessError(
        1, ["go", "list", "std"], stderr="go: cannot find GOROOT directory\n"
    )

    with pytest.raises(PackageResolutionError) as exc_info:
        SubprocessGoClient().list_std()

    assert "cannot find GOROOT" in exc_info.value.message


@pytest.mark.unit
@pytest.mark.mock
def test_list_std_non_zero_exit_without_stderr(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.side_effect = subprocess.CalledProcessError(2, ["go", "list", "std"])

    with pytest.raises(PackageResolutionError) as exc_info:
        SubprocessGoClient().list_std()

    assert "exit status 2" in exc_info.value.message


@pytest.mark.unit
@pytest.mark.mock
def test_list_std_os_error_raises(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.side_effect = PermissionError("denied")

    with pytest.raises(PackageResolutionError):
        SubprocessGoClient().list_std()


# ============================================================================
# Tests for SubprocessGoClient.package_info
# ============================================================================


@pytest.mark.unit
@pytest.mark.mock
def test_package_info_decodes_json(mocker):
    info = {
        "Dir": "/usr/local/go/src/bufio",
        "ImportPath": "bufio",
        "Name": "bufio",
        "GoFiles": ["bufio.go", "scan.go"],
    }
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.return_value = MagicMock(stdout=json.dumps(info, indent="\t"))

    result = SubprocessGoClient().package_info("bufio")

    assert result == info
    assert mock_run.call_args[0][0] == ["go", "list", "-json", "bufio"]


@pytest.mark.unit
@pytest.mark.mock
def test_package_info_failure_carries_import_path(mocker):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.side_effect = subprocess.CalledProcessError(
        1, ["go"], stderr="package nope is not in std\n"
    )

    with pytest.raises(PackageResolutionError) as exc_info:
        SubprocessGoClient().package_info("nope")

    assert exc_info.value.import_path == "nope"


@pytest.mark.unit
@pytest.mark.mock
@pytest.mark.parametrize("stdout", ["not json", "", "[1, 2]"])
def test_package_info_bad_output_raises(mocker, stdout):
    mock_run = mocker.patch("adapters.go.subprocess.run")
    mock_run.return_value = MagicMock(stdout=stdout)

    with pytest.raises(PackageResolutionError) as exc_info:
        SubprocessGoClient().package_info("io")

    assert exc_info.value.import_path == "io"
