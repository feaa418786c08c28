from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from stemcell_fips.exceptions import AssertionMismatch, StemcellCheckError
from stemcell_fips.report import CheckResult, CheckStatus
from stemcell_fips.target import Target

logger = logging.getLogger(__name__)


class Check(ABC):
    """
    Single assertion about the image. Subclasses implement `verify()`, which raises AssertionMismatch
    when the image does not comply. `run()` never raises for a failed or broken check, so that one check
    cannot abort the others.
    """

    name: str

    @abstractmethod
    def verify(self, target: Target) -> None:
        raise NotImplementedError("Not meant to be implemented")

    def run(self, target: Target) -> CheckResult:
        try:
            self.verify(target)
        except AssertionMismatch as e:
            logger.warning(f"Check '{self.name}' failed: {e.message}")
            return CheckResult(self.name, CheckStatus.FAILED, e.message, e.details)
        except StemcellCheckError as e:
            logger.error(f"Check '{self.name}' could not be evaluated: {e}")
            return CheckResult(self.name, CheckStatus.ERROR, str(e))
        logger.info(f"Check '{self.name}' passed")
        return CheckResult(self.name, CheckStatus.PASSED)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
