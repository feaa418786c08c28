from __future__ import annotations

import logging

from stemcell_fips import constants
from stemcell_fips.checks.check import Check
from stemcell_fips.exceptions import AssertionMismatch
from stemcell_fips.packages.loader import PackageListLoader
from stemcell_fips.packages.normalization import normalize_selections
from stemcell_fips.packages.reconciliation import Mismatch, expected_package_set, reconcile
from stemcell_fips.platform import Scenario
from stemcell_fips.target import Target, TargetError

logger = logging.getLogger(__name__)


class PackageSetCheck(Check):
    def __init__(self, scenario: Scenario, loader: PackageListLoader, os_name: str = constants.DEFAULT_OS_NAME):
        self.scenario = scenario
        self.loader = loader
        self.os_name = os_name
        self.name = f"installed packages: {scenario.description}"

    def verify(self, target: Target) -> None:
        expected = expected_package_set(self.scenario, self.loader, self.os_name)

        result = target.run(constants.SELECTIONS_COMMAND)
        if not result.succeeded:
            raise TargetError(
                f"`{constants.SELECTIONS_COMMAND}` exited with {result.exit_status}: {result.stderr.strip()}"
            )
        observed = normalize_selections(result.stdout)
        logger.debug(f"Observed {len(observed)} package selections")

        reconciliation = reconcile(expected, observed)
        if isinstance(reconciliation, Mismatch):
            raise AssertionMismatch(
                f"{len(reconciliation.missing)} expected packages are missing, "
                f"{len(reconciliation.extra)} installed packages are not expected",
                {"missing": sorted(reconciliation.missing), "extra": sorted(reconciliation.extra)},
            )
