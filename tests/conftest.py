from __future__ import annotations

import pytest

import stemcell_fips.config.configuration as config_module
from stemcell_fips import constants
from stemcell_fips.packages.loader import AssetPackageListLoader, InMemoryPackageListLoader
from stemcell_fips.target import CommandResult, FakeTarget
from tests.stemcell_test_utils import read_data


@pytest.fixture(autouse=True)
def load_default_config(tmp_path):
    config_module.config.load(config_module.DEFAULT_CONFIG_PATH)
    config_module.config.log_filepath = str(tmp_path / "stemcell_fips.log")


@pytest.fixture(scope="session")
def sshd_config() -> str:
    return read_data("sshd_config")


@pytest.fixture(scope="session")
def grub_cfg() -> str:
    return read_data("grub.cfg")


@pytest.fixture(scope="session")
def aws_selections() -> str:
    return read_data("dpkg_selections_aws.txt")


@pytest.fixture(scope="session")
def shipped_loader() -> AssetPackageListLoader:
    return AssetPackageListLoader()


@pytest.fixture
def toy_loader() -> InMemoryPackageListLoader:
    return InMemoryPackageListLoader(
        {
            "dpkg-list-ubuntu-jammy.txt": ["bash", "openssh-server", "rsyslog"],
            "dpkg-list-ubuntu-jammy-fips.txt": ["linux-image-fips", "linux-image-5.15-fips"],
            "dpkg-list-ubuntu-jammy-google-additions.txt": ["google-guest-agent"],
            "dpkg-list-ubuntu-jammy-vsphere-additions.txt": ["open-vm-tools"],
            "dpkg-list-ubuntu-jammy-azure-additions.txt": ["walinuxagent"],
            "dpkg-list-ubuntu-jammy-cloudstack-additions.txt": ["cloud-init"],
            "dpkg-list-ubuntu-jammy-softlayer-additions.txt": ["open-iscsi"],
        }
    )


@pytest.fixture
def compliant_aws_target(sshd_config: str, grub_cfg: str, aws_selections: str) -> FakeTarget:
    return FakeTarget(
        commands={constants.SELECTIONS_COMMAND: CommandResult(aws_selections)},
        files={constants.SSHD_CONFIG_PATH: sshd_config, constants.GRUB_CONFIG_PATH: grub_cfg},
        installed_packages=["linux-image-fips", "linux-fips", "openssh-server"],
    )
