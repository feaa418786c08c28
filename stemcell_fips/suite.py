from __future__ import annotations

import logging
from datetime import datetime

from stemcell_fips import constants
from stemcell_fips.checks import (
    Check,
    GrubFileCheck,
    GrubFipsInitrdCheck,
    GrubFipsKernelCheck,
    KernelPackageCheck,
    PackageSetCheck,
    SshHostKeysCheck,
    SshMacsCheck,
)
from stemcell_fips.config.configuration import config
from stemcell_fips.packages.loader import AssetPackageListLoader, PackageListLoader
from stemcell_fips.platform import Platform, Scenario, resolve_scenario
from stemcell_fips.report import SuiteReport
from stemcell_fips.target import Target

logger = logging.getLogger(__name__)


def build_checks(
    scenario: Scenario,
    loader: PackageListLoader,
    os_name: str = constants.DEFAULT_OS_NAME,
    sshd_config_path: str = constants.SSHD_CONFIG_PATH,
    grub_config_path: str = constants.GRUB_CONFIG_PATH,
) -> list[Check]:
    return [
        KernelPackageCheck(constants.FIPS_KERNEL_PACKAGE, installed=True),
        *[KernelPackageCheck(x, installed=False) for x in constants.FORBIDDEN_KERNEL_PACKAGES],
        SshMacsCheck(sshd_config_path),
        SshHostKeysCheck(sshd_config_path),
        GrubFileCheck(grub_config_path),
        GrubFipsKernelCheck(grub_config_path),
        GrubFipsInitrdCheck(grub_config_path),
        PackageSetCheck(scenario, loader, os_name),
    ]


def run_suite(
    target: Target,
    platform: Platform,
    loader: PackageListLoader | None = None,
    os_name: str | None = None,
) -> SuiteReport:
    """
    Evaluates every check against the target. Failed checks do not stop the remaining ones.

    :raises NoScenarioApplicable: if the platform belongs to no package scenario
    """
    scenario = resolve_scenario(platform)
    logger.info(f"Verifying {target} as a {platform} stemcell, package scenario '{scenario.name}'")

    if loader is None:
        loader = AssetPackageListLoader(config.assets_dir)
    checks = build_checks(
        scenario,
        loader,
        os_name or config.os_name,
        config.sshd_config_path,
        config.grub_config_path,
    )

    start = datetime.now()
    report = SuiteReport(platform.value, scenario.name, timestamp=start)
    for check in checks:
        report.results.append(check.run(target))

    logger.info(
        f"{len(report) - len(report.failed)}/{len(report)} checks passed, took {(datetime.now() - start)} seconds."
    )
    return report
