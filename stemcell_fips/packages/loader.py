from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from importlib.resources import files
from pathlib import Path
from typing import Iterable, Mapping

from stemcell_fips.exceptions import AssetNotFound, AssetUnreadable

logger = logging.getLogger(__name__)


class PackageListLoader(ABC):
    """Source of reference package lists, addressed by asset name."""

    @abstractmethod
    def load(self, asset_name: str) -> frozenset[str]:
        raise NotImplementedError("Not meant to be implemented")


def _read_lines(text: str) -> frozenset[str]:
    # only newlines delimit entries, str.splitlines() would also split on form feeds
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return frozenset(line.rstrip("\r") for line in lines)


class AssetPackageListLoader(PackageListLoader):
    """
    Reads newline-delimited package lists from a directory. Entries are not validated,
    malformed lines end up in the set as they are. Files must be UTF-8 encoded.
    """

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory) if directory else Path(str(files("stemcell_fips") / "assets"))

    def load(self, asset_name: str) -> frozenset[str]:
        path = self.directory / asset_name
        if not path.is_file():
            raise AssetNotFound(asset_name, str(self.directory))
        try:
            with path.open("r", encoding="utf-8") as handle:
                entries = _read_lines(handle.read())
        except (OSError, UnicodeDecodeError) as e:
            raise AssetUnreadable(asset_name, str(e)) from e
        logger.debug(f"Loaded {len(entries)} packages from {path}")
        return entries


class InMemoryPackageListLoader(PackageListLoader):
    def __init__(self, lists: Mapping[str, Iterable[str]]):
        self.lists = {name: frozenset(entries) for name, entries in lists.items()}

    def load(self, asset_name: str) -> frozenset[str]:
        if asset_name not in self.lists:
            raise AssetNotFound(asset_name, "memory")
        return self.lists[asset_name]
