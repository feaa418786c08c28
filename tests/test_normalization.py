from __future__ import annotations

import pytest

from stemcell_fips.packages.normalization import normalize_package_name, normalize_selections, parse_selections


@pytest.mark.parametrize(
    "name, expected",
    [
        ("linux-image-5.19.0-109-generic", "linux-image-5.19-generic"),
        ("linux-modules-5.15.0-1093-fips", "linux-modules-5.15-fips"),
        ("linux-headers-5.15.0-1093-fips", "linux-headers-5.15-fips"),
        ("linux-fips-headers-5.15.0-1093", "linux-fips-headers-5.15"),
        ("linux-image-fips", "linux-image-fips"),
        ("linux-generic-hwe-22.04", "linux-generic-hwe-22.04"),
        ("libssl3:amd64", "libssl3:amd64"),
        ("linux-base", "linux-base"),
        ("", ""),
    ],
)
def test_normalize_package_name(name: str, expected: str):
    assert normalize_package_name(name) == expected


@pytest.mark.parametrize(
    "name",
    [
        "linux-image-5.19.0-109-generic",
        "linux-fips-headers-5.15.0-1093",
        "linux-image-5.15-fips",
        "openssh-server",
        "python3.10-minimal",
        "linux-a-1.2.3-4.5.6-7",
    ],
)
def test_normalization_is_idempotent(name: str):
    once = normalize_package_name(name)
    assert normalize_package_name(once) == once


def test_rewrites_until_no_version_is_left():
    assert normalize_package_name("linux-a-1.2.3-4.5.6-7") == "linux-a-1.2.5"


def test_only_dots_between_version_numbers():
    assert normalize_package_name("linux-image-5x19y0-109") == "linux-image-5x19y0-109"


def test_parse_selections():
    output = "adduser\t\t\t\t\tinstall\nlibc6:amd64\t\t\t\tinstall\n\nrsync\t\t\t\t\t\tdeinstall\n"
    assert parse_selections(output) == ["adduser", "libc6:amd64", "rsync"]


def test_parse_empty_selections():
    assert parse_selections("") == []
    assert parse_selections("\n  \n") == []


def test_normalize_selections_keeps_order(aws_selections: str):
    names = normalize_selections(aws_selections)
    assert names[0] == "adduser"
    assert "linux-image-5.15-fips" in names
    assert "linux-image-5.15.0-1093-fips" not in names
    assert names.index("linux-headers-5.15-fips") < names.index("linux-image-5.15-fips")
