from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from stemcell_fips.exceptions import AmbiguousScenario, NoScenarioApplicable, UnknownPlatform

logger = logging.getLogger(__name__)


class Platform(Enum):
    ALICLOUD = "alicloud"
    AWS = "aws"
    AZURE = "azure"
    CLOUDSTACK = "cloudstack"
    GOOGLE = "google"
    OPENSTACK = "openstack"
    SOFTLAYER = "softlayer"
    VCLOUD = "vcloud"
    VSPHERE = "vsphere"
    WARDEN = "warden"

    @classmethod
    def from_str(cls, identifier: str) -> Platform:
        try:
            return cls(identifier.strip().lower())
        except ValueError:
            raise UnknownPlatform(identifier) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Scenario:
    """
    Named comparison of installed packages. The expected package set is the base list plus the FIPS list,
    extended by at most one platform addendum.
    """

    name: str
    description: str
    platforms: frozenset[Platform]
    addendum: str | None = None

    def is_applicable(self, platform: Platform) -> bool:
        return platform in self.platforms

    @property
    def excluded_platforms(self) -> frozenset[Platform]:
        return frozenset(Platform) - self.platforms


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        "base",
        "contains only the base set of packages for alicloud, aws, openstack, warden",
        frozenset({Platform.ALICLOUD, Platform.AWS, Platform.OPENSTACK, Platform.WARDEN}),
    ),
    Scenario(
        "google",
        "contains only the base set of packages plus google-specific packages",
        frozenset({Platform.GOOGLE}),
        "google",
    ),
    Scenario(
        "vsphere",
        "contains only the base set of packages plus vsphere-specific packages",
        frozenset({Platform.VSPHERE, Platform.VCLOUD}),
        "vsphere",
    ),
    Scenario(
        "azure",
        "contains only the base set of packages plus azure-specific packages",
        frozenset({Platform.AZURE}),
        "azure",
    ),
    Scenario(
        "cloudstack",
        "contains only the base set of packages plus cloudstack-specific packages",
        frozenset({Platform.CLOUDSTACK}),
        "cloudstack",
    ),
    Scenario(
        "softlayer",
        "contains only the base set of packages plus softlayer-specific packages",
        frozenset({Platform.SOFTLAYER}),
        "softlayer",
    ),
)


def applicable_scenarios(platform: Platform, scenarios: Iterable[Scenario] = SCENARIOS) -> list[Scenario]:
    return [x for x in scenarios if x.is_applicable(platform)]


def resolve_scenario(platform: Platform, scenarios: Iterable[Scenario] = SCENARIOS) -> Scenario:
    """
    Returns the only scenario that applies to `platform`.

    :raises NoScenarioApplicable: if no scenario includes the platform
    :raises AmbiguousScenario: if several scenarios include the platform
    """
    matching = applicable_scenarios(platform, scenarios)
    if not matching:
        raise NoScenarioApplicable(platform)
    if len(matching) > 1:
        raise AmbiguousScenario(platform, [x.name for x in matching])
    logger.debug(f"Platform {platform} resolved to scenario '{matching[0].name}'")
    return matching[0]


def validate_scenarios(scenarios: Iterable[Scenario] = SCENARIOS) -> None:
    """Checks that the scenarios partition the platforms: each platform is included exactly once."""
    scenarios = list(scenarios)
    for platform in Platform:
        resolve_scenario(platform, scenarios)


validate_scenarios()
