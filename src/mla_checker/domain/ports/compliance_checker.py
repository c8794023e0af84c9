"""Port: Compliance checker. Validates existing documents against MLA rules."""

from abc import ABC, abstractmethod
from pathlib import Path

from mla_checker.domain.models.report import AnalysisReport


class ComplianceCheckerPort(ABC):
    """Contract for checking document compliance against MLA 9 rules."""

    @abstractmethod
    def check(self, file_path: Path) -> AnalysisReport:
        """Run compliance checks on the given file and return a report."""
        ...
