from __future__ import annotations

from stemcell_fips.checks.check import Check
from stemcell_fips.exceptions import AssertionMismatch
from stemcell_fips.target import Target


class KernelPackageCheck(Check):
    def __init__(self, package: str, installed: bool = True):
        self.package = package
        self.installed = installed
        self.name = f"package {package} is {'' if installed else 'not '}installed"

    def verify(self, target: Target) -> None:
        actual = target.package_installed(self.package)
        if actual != self.installed:
            raise AssertionMismatch(
                f"{self.package} is {'' if actual else 'not '}installed",
                {"package": self.package, "installed": actual},
            )
