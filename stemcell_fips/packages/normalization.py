"""
Normalization of installed package names. Versioned kernel packages, e.g. ``linux-modules-5.15.0-1093-fips``,
change name with every kernel point release; they are collapsed to ``linux-modules-5.15-fips`` so that the
comparison against the reference lists stays stable across rebuilds.
"""
from __future__ import annotations

from stemcell_fips.constants import LINUX_VERSION_RE, LINUX_VERSION_REPLACEMENT


def normalize_package_name(name: str) -> str:
    """
    Rewrites the first ``linux-<flavor>-<major>.<minor>.<patch>-<build>`` occurrence to
    ``linux-<flavor>-<major>.<minor>``, keeping whatever follows. Other names pass through unchanged.
    The rewrite is repeated until the name no longer matches, so the result is a fixed point.
    """
    # every rewrite drops at least the patch and build numbers, so the loop terminates
    while True:
        rewritten = LINUX_VERSION_RE.sub(LINUX_VERSION_REPLACEMENT, name, count=1)
        if rewritten == name:
            return name
        name = rewritten


def parse_selections(output: str) -> list[str]:
    """Extracts package names (the first column) from ``dpkg --get-selections`` output."""
    return [line.split()[0] for line in output.splitlines() if line.strip()]


def normalize_selections(output: str) -> list[str]:
    return [normalize_package_name(x) for x in parse_selections(output)]
