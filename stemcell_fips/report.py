from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping

from stemcell_fips.serialization.json import ComplexSerializableType


class CheckStatus(Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass
class CheckResult(ComplexSerializableType):
    name: str
    status: CheckStatus
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASSED

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "status": self.status.value, "message": self.message, "details": self.details}

    @classmethod
    def from_dict(cls, dct: Mapping) -> CheckResult:
        return cls(dct["name"], CheckStatus(dct["status"]), dct.get("message", ""), dict(dct.get("details", {})))


@dataclass
class SuiteReport(ComplexSerializableType):
    platform: str
    scenario: str
    results: List[CheckResult] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    def __iter__(self) -> Iterator[CheckResult]:
        yield from self.results

    def __len__(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> bool:
        return all(x.passed for x in self.results)

    @property
    def failed(self) -> List[CheckResult]:
        return [x for x in self.results if not x.passed]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "scenario": self.scenario,
            "results": list(self.results),
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, dct: Mapping) -> SuiteReport:
        return cls(
            dct["platform"],
            dct["scenario"],
            list(dct["results"]),
            datetime.fromisoformat(dct["timestamp"]),
        )

    def summary(self) -> str:
        lines = [f"FIPS stemcell checks for {self.platform} (scenario '{self.scenario}'):"]
        for result in self.results:
            lines.append(f"  [{result.status.value.upper():6}] {result.name}")
            if not result.passed:
                lines.append(f"           {result.message}")
                for key, val in result.details.items():
                    if isinstance(val, (set, frozenset, list, tuple)):
                        val = ", ".join(sorted(val)) if val else "-"
                    lines.append(f"           {key}: {val}")
        lines.append(f"{len(self) - len(self.failed)}/{len(self)} checks passed.")
        return "\n".join(lines)
