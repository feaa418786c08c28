"""Hardening of the SSH daemon: approved MAC algorithms and the set of host keys."""
from __future__ import annotations

import re
from collections import Counter

from stemcell_fips import constants
from stemcell_fips.checks.check import Check
from stemcell_fips.exceptions import AssertionMismatch
from stemcell_fips.target import Target

MACS_LINE = "MACs " + ",".join(constants.APPROVED_MACS)


def has_approved_macs(content: str) -> bool:
    """True iff some line is exactly the approved MAC list, in the approved order."""
    return re.search(f"^{re.escape(MACS_LINE)}$", content, re.MULTILINE) is not None


def host_key_lines(content: str) -> list[str]:
    return constants.HOST_KEY_LINE_RE.findall(content)


def has_expected_host_keys(content: str) -> bool:
    """True iff the HostKey lines are exactly the RSA and ECDSA keys, in any order."""
    return Counter(host_key_lines(content)) == Counter(constants.SSH_HOST_KEYS)


class SshMacsCheck(Check):
    name = "sshd allows only secure HMACs"

    def __init__(self, path: str = constants.SSHD_CONFIG_PATH):
        self.path = path

    def verify(self, target: Target) -> None:
        content = target.read_file(self.path)
        if not has_approved_macs(content):
            found = [x for x in content.splitlines() if x.startswith("MACs")]
            raise AssertionMismatch(
                f"{self.path} does not contain the line '{MACS_LINE}'", {"content": "\n".join(found)}
            )


class SshHostKeysCheck(Check):
    name = "sshd enables RSA, ECDSA host keys"

    def __init__(self, path: str = constants.SSHD_CONFIG_PATH):
        self.path = path

    def verify(self, target: Target) -> None:
        found = host_key_lines(target.read_file(self.path))
        if Counter(found) != Counter(constants.SSH_HOST_KEYS):
            raise AssertionMismatch(
                f"{self.path} must configure exactly the RSA and ECDSA host keys", {"content": "\n".join(found)}
            )
