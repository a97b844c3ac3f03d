"""Tests for SSH key line validation."""

import pytest
from keydata import RSA_KEY_DATA
from superkeyloader.ssh import is_valid_key_line


@pytest.mark.parametrize(
    "line",
    [
        f"ssh-rsa {RSA_KEY_DATA}",
        f"ssh-rsa {RSA_KEY_DATA} user@host",
        f"ssh-ecdsa {RSA_KEY_DATA}",
        f"  ssh-rsa   {RSA_KEY_DATA}  ",
    ],
)
def test_valid_key_line(line: str) -> None:
    assert is_valid_key_line(line)


@pytest.mark.parametrize(
    "line",
    [
        pytest.param("42", id="single-part"),
        pytest.param("", id="empty"),
        pytest.param(f"ssh-dss {RSA_KEY_DATA}", id="unknown-type"),
        pytest.param("ssh-rsa not!base64", id="not-base64"),
        pytest.param("ssh-rsa AAAAé===", id="non-ascii"),
        pytest.param("ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQCarT/me5sWxY9Tizc", id="bad-padding"),
    ],
)
def test_invalid_key_line(line: str) -> None:
    assert not is_valid_key_line(line)
