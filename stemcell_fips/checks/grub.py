"""Bootloader configuration must boot the FIPS kernel and initrd."""
from __future__ import annotations

from stemcell_fips import constants
from stemcell_fips.checks.check import Check
from stemcell_fips.exceptions import AssertionMismatch
from stemcell_fips.target import Target


def has_fips_kernel_line(content: str) -> bool:
    return constants.FIPS_KERNEL_LINE_RE.search(content) is not None


def has_fips_initrd_line(content: str) -> bool:
    return constants.FIPS_INITRD_LINE_RE.search(content) is not None


def _lines_mentioning(content: str, word: str) -> str:
    return "\n".join(x for x in content.splitlines() if word in x)


class GrubFileCheck(Check):
    def __init__(self, path: str = constants.GRUB_CONFIG_PATH):
        self.path = path
        self.name = f"{path} is a file"

    def verify(self, target: Target) -> None:
        if not target.is_file(self.path):
            raise AssertionMismatch(f"{self.path} is not a regular file", {"path": self.path})


class GrubFipsKernelCheck(Check):
    def __init__(self, path: str = constants.GRUB_CONFIG_PATH):
        self.path = path
        self.name = f"{path} boots the FIPS kernel"

    def verify(self, target: Target) -> None:
        content = target.read_file(self.path)
        if not has_fips_kernel_line(content):
            raise AssertionMismatch(
                f"{self.path} has no FIPS kernel line matching {constants.FIPS_KERNEL_LINE_RE.pattern!r}",
                {"content": _lines_mentioning(content, "vmlinuz")},
            )


class GrubFipsInitrdCheck(Check):
    def __init__(self, path: str = constants.GRUB_CONFIG_PATH):
        self.path = path
        self.name = f"{path} loads the FIPS initrd"

    def verify(self, target: Target) -> None:
        content = target.read_file(self.path)
        if not has_fips_initrd_line(content):
            raise AssertionMismatch(
                f"{self.path} has no FIPS initrd line matching {constants.FIPS_INITRD_LINE_RE.pattern!r}",
                {"content": _lines_mentioning(content, "initrd")},
            )
