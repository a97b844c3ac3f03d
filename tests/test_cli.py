"""Tests for the superkeyloader command line."""

import json
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest
import structlog
from click.testing import CliRunner
from keydata import VALID_3_KEYS_JSON, VALID_3_KEYS_TEXT, make_response
from superkeyloader.cli import main


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def keys_file(tmp_path: Path) -> Path:
    return tmp_path / "authorized_keys"


def test_cli_github_json_output(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    mock_httpx_client.get.return_value = make_response(json=VALID_3_KEYS_JSON)

    result = runner.invoke(main, ["--output", str(keys_file), "testuser"])

    assert result.exit_code == 0, result.output
    keys = json.loads(result.output)["keys"]
    assert len(keys) == 3
    assert all(" from-GH-id-" in key for key in keys)
    assert keys_file.read_text().splitlines() == keys


def test_cli_human_output(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    mock_httpx_client.get.return_value = make_response(json=VALID_3_KEYS_JSON)

    result = runner.invoke(main, ["--human", "-o", str(keys_file), "testuser"])

    assert result.exit_code == 0, result.output
    assert "Downloaded 3 SSH keys for user 'testuser' from GitHub" in result.output


def test_cli_append_existing_file(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    keys_file.write_text("line1\nline2\nline3\n")
    mock_httpx_client.get.return_value = make_response(json=VALID_3_KEYS_JSON)

    result = runner.invoke(main, ["-m", "-o", str(keys_file), "testuser"])

    assert result.exit_code == 0, result.output
    assert len(keys_file.read_text().splitlines()) == 6


def test_cli_gitlab(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    mock_httpx_client.get.return_value = make_response(text=VALID_3_KEYS_TEXT)

    result = runner.invoke(
        main, ["--provider", "gitlab", "-o", str(keys_file), "test_1.user-name"]
    )

    assert result.exit_code == 0, result.output
    assert keys_file.read_text() == VALID_3_KEYS_TEXT
    mock_httpx_client.get.assert_called_once_with(
        "https://gitlab.com/test_1.user-name.keys"
    )


def test_cli_stdout_does_not_write_file(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    mock_httpx_client.get.return_value = make_response(json=VALID_3_KEYS_JSON)

    result = runner.invoke(main, ["--stdout", "-o", str(keys_file), "testuser"])

    assert result.exit_code == 0, result.output
    assert len(result.output.splitlines()) == 3
    assert not keys_file.exists()


def test_cli_quiet(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    mock_httpx_client.get.return_value = make_response(json=VALID_3_KEYS_JSON)

    result = runner.invoke(main, ["-q", "-o", str(keys_file), "testuser"])

    assert result.exit_code == 0
    assert not result.output
    assert keys_file.exists()


def test_cli_missing_username(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    mock_httpx_client.get.return_value = make_response(404, json={"message": "Not Found"})

    result = runner.invoke(main, ["-o", str(keys_file), "about"])

    assert result.exit_code == 1
    assert "Error: Wrong username" in result.output
    assert not keys_file.exists()


def test_cli_invalid_username(
    runner: CliRunner, mock_httpx_client_cls: MagicMock, keys_file: Path
) -> None:
    result = runner.invoke(main, ["-o", str(keys_file), "test-"])

    assert result.exit_code == 1
    assert "Invalid username" in result.output
    mock_httpx_client_cls.assert_not_called()
    assert not keys_file.exists()


def test_cli_no_keys_leaves_file_untouched(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    keys_file.write_text("existing\n")
    mock_httpx_client.get.return_value = make_response(json=[])

    result = runner.invoke(main, ["-o", str(keys_file), "testuser"])

    assert result.exit_code == 1
    assert "User has no SSH keys available" in result.output
    assert keys_file.read_text() == "existing\n"


def test_cli_network_unreachable(
    runner: CliRunner, mock_httpx_client: MagicMock, keys_file: Path
) -> None:
    mock_httpx_client.get.side_effect = httpx.ConnectError("name resolution failed")

    result = runner.invoke(main, ["-o", str(keys_file), "testuser"])

    assert result.exit_code == 1
    assert "Unable to reach GitHub" in result.output


def test_cli_token_from_option(
    runner: CliRunner,
    mock_httpx_client_cls: MagicMock,
    mock_httpx_client: MagicMock,
    keys_file: Path,
) -> None:
    mock_httpx_client.get.return_value = make_response(json=VALID_3_KEYS_JSON)

    runner.invoke(main, ["--token", "cli-token", "-o", str(keys_file), "testuser"])

    headers = mock_httpx_client_cls.call_args.kwargs["headers"]
    assert headers["Authorization"] == "token cli-token"


def test_cli_token_from_settings(
    runner: CliRunner,
    mock_httpx_client_cls: MagicMock,
    mock_httpx_client: MagicMock,
    keys_file: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SUPERKEYLOADER_GITLAB_TOKEN", "env-token")
    mock_httpx_client.get.return_value = make_response(text=VALID_3_KEYS_TEXT)

    runner.invoke(main, ["--provider", "gitlab", "-o", str(keys_file), "someone"])

    headers = mock_httpx_client_cls.call_args.kwargs["headers"]
    assert headers["Authorization"] == "Bearer env-token"


def test_cli_default_output_from_settings(
    runner: CliRunner,
    mock_httpx_client: MagicMock,
    keys_file: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SUPERKEYLOADER_AUTHORIZED_KEYS_PATH", str(keys_file))
    mock_httpx_client.get.return_value = make_response(json=VALID_3_KEYS_JSON)

    result = runner.invoke(main, ["testuser"])

    assert result.exit_code == 0, result.output
    assert len(keys_file.read_text().splitlines()) == 3


@pytest.mark.parametrize(
    "flags",
    [["--human", "--json"], ["--json", "--stdout"], ["-m", "-p"]],
)
def test_cli_conflicting_output_flags(
    runner: CliRunner, mock_httpx_client_cls: MagicMock, flags: list[str]
) -> None:
    result = runner.invoke(main, [*flags, "testuser"])

    assert result.exit_code == 2
    assert "mutually exclusive" in result.output
    mock_httpx_client_cls.assert_not_called()


def test_cli_unknown_provider(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--provider", "bitbucket", "testuser"])

    assert result.exit_code == 2


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SUPERKEYLOADER_LOG_LEVEL", "verbose"),
        ("SUPERKEYLOADER_TIMEOUT", "abc"),
    ],
)
def test_cli_invalid_configuration(
    runner: CliRunner,
    mock_httpx_client_cls: MagicMock,
    keys_file: Path,
    monkeypatch: pytest.MonkeyPatch,
    name: str,
    value: str,
) -> None:
    monkeypatch.setenv(name, value)

    result = runner.invoke(main, ["-o", str(keys_file), "testuser"])

    assert result.exit_code == 1
    assert "Error: invalid configuration" in result.output
    mock_httpx_client_cls.assert_not_called()
    assert not keys_file.exists()
