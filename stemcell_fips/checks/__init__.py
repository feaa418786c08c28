from stemcell_fips.checks.check import Check
from stemcell_fips.checks.grub import GrubFileCheck, GrubFipsInitrdCheck, GrubFipsKernelCheck
from stemcell_fips.checks.kernel import KernelPackageCheck
from stemcell_fips.checks.packages import PackageSetCheck
from stemcell_fips.checks.ssh import SshHostKeysCheck, SshMacsCheck

__all__ = [
    "Check",
    "GrubFileCheck",
    "GrubFipsInitrdCheck",
    "GrubFipsKernelCheck",
    "KernelPackageCheck",
    "PackageSetCheck",
    "SshHostKeysCheck",
    "SshMacsCheck",
]
