from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from stemcell_fips.report import CheckResult, CheckStatus, SuiteReport


@pytest.fixture
def report() -> SuiteReport:
    return SuiteReport(
        "google",
        "google",
        [
            CheckResult("package linux-image-fips is installed", CheckStatus.PASSED),
            CheckResult(
                "installed packages: contains only the base set of packages plus google-specific packages",
                CheckStatus.FAILED,
                "1 expected packages are missing, 0 installed packages are not expected",
                {"missing": ["google-guest-agent"], "extra": []},
            ),
            CheckResult("sshd allows only secure HMACs", CheckStatus.ERROR, "/etc/ssh/sshd_config is not a regular file"),
        ],
        datetime(2024, 5, 1, 12, 30),
    )


def test_report_status(report: SuiteReport):
    assert not report.passed
    assert [x.status for x in report.failed] == [CheckStatus.FAILED, CheckStatus.ERROR]
    assert SuiteReport("aws", "base").passed


def test_report_json(report: SuiteReport, tmp_path: Path):
    path = tmp_path / "report.json"
    report.to_json(path)

    with path.open("r") as handle:
        raw = json.load(handle)
    assert raw["_type"] == "SuiteReport"
    assert raw["timestamp"] == "2024-05-01T12:30:00"
    assert raw["results"][1]["status"] == "failed"

    loaded = SuiteReport.from_json(path)
    assert loaded == report


def test_from_json_wrong_type(tmp_path: Path):
    path = tmp_path / "result.json"
    CheckResult("x", CheckStatus.PASSED).to_json(path)
    with pytest.raises(ValueError):
        SuiteReport.from_json(path)


def test_summary(report: SuiteReport):
    summary = report.summary()
    assert summary.splitlines()[0] == "FIPS stemcell checks for google (scenario 'google'):"
    assert "[PASSED] package linux-image-fips is installed" in summary
    assert "missing: google-guest-agent" in summary
    assert "extra: -" in summary
    assert summary.splitlines()[-1] == "1/3 checks passed."
