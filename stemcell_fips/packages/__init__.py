"""
Package-set verification: reference lists, normalization of installed package names and set reconciliation.
"""
from stemcell_fips.packages.loader import AssetPackageListLoader, InMemoryPackageListLoader, PackageListLoader
from stemcell_fips.packages.normalization import normalize_package_name, normalize_selections, parse_selections
from stemcell_fips.packages.reconciliation import Match, Mismatch, ReconciliationResult, expected_package_set, reconcile

__all__ = [
    "PackageListLoader",
    "AssetPackageListLoader",
    "InMemoryPackageListLoader",
    "normalize_package_name",
    "normalize_selections",
    "parse_selections",
    "Match",
    "Mismatch",
    "ReconciliationResult",
    "expected_package_set",
    "reconcile",
]
