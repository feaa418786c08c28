from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Union

from stemcell_fips import constants
from stemcell_fips.packages.loader import PackageListLoader
from stemcell_fips.platform import Scenario

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    matched: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Mismatch:
    missing: frozenset[str]
    extra: frozenset[str]
    matched: bool = field(default=False, init=False)


ReconciliationResult = Union[Match, Mismatch]


def reconcile(expected: Iterable[str], observed: Iterable[str]) -> ReconciliationResult:
    """
    Compares two package sets, ignoring order and duplicates.
    `missing` holds the expected packages that are not installed, `extra` the installed ones that are not expected.
    """
    expected_set = frozenset(expected)
    observed_set = frozenset(observed)
    if expected_set == observed_set:
        return Match()
    return Mismatch(missing=expected_set - observed_set, extra=observed_set - expected_set)


def expected_package_set(
    scenario: Scenario, loader: PackageListLoader, os_name: str = constants.DEFAULT_OS_NAME
) -> frozenset[str]:
    """Assembles base + FIPS + (optional) platform addendum for the scenario."""
    expected = loader.load(constants.BASE_PACKAGE_LIST.format(os_name=os_name)) | loader.load(
        constants.FIPS_PACKAGE_LIST.format(os_name=os_name)
    )
    if scenario.addendum:
        expected |= loader.load(constants.ADDITIONS_PACKAGE_LIST.format(os_name=os_name, platform=scenario.addendum))
    logger.debug(f"Expecting {len(expected)} packages for scenario '{scenario.name}'")
    return expected
