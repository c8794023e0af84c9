"""Use Case: Check Document Compliance.

Delegates compliance checking to an injected ComplianceCheckerPort.
"""

from pathlib import Path

from mla_checker.domain.models.report import AnalysisReport
from mla_checker.domain.ports.compliance_checker import ComplianceCheckerPort


class CheckComplianceUseCase:
    """Orchestrate document compliance checking."""

    def __init__(self, checker: ComplianceCheckerPort) -> None:
        self._checker = checker

    def execute(self, file_path: Path) -> AnalysisReport:
        """Run compliance checks on the given file.

        Args:
            file_path: Path to the .docx document to check.

        Returns:
            An AnalysisReport with all findings.
        """
        return self._checker.check(file_path)
