"""DOCX compliance checker, implements ComplianceCheckerPort.

Reads a .docx file from disk, extracts its model and runs the MLA
rules engine over it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from mla_checker.domain.errors import UnsupportedFormatError
from mla_checker.domain.models.report import AnalysisReport
from mla_checker.domain.ports.compliance_checker import ComplianceCheckerPort
from mla_checker.domain.ports.document_extractor import DocumentExtractorPort
from mla_checker.infrastructure.extractors.docx_extractor import DocxStructuralExtractor
from mla_checker.validators.engine import MLARulesEngine

logger = logging.getLogger(__name__)


class DocxComplianceChecker(ComplianceCheckerPort):
    """Check .docx files for MLA 9 compliance."""

    def __init__(
        self,
        extractor: Optional[DocumentExtractorPort] = None,
        engine: Optional[MLARulesEngine] = None,
    ) -> None:
        self._extractor = extractor or DocxStructuralExtractor()
        self._engine = engine or MLARulesEngine()

    def check(self, file_path: Path) -> AnalysisReport:
        """Run all compliance checks and return the report."""
        file_path = Path(file_path)
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {file_path}")
        if file_path.suffix.lower() != ".docx":
            raise UnsupportedFormatError(
                f"Unsupported format: {file_path.suffix}. Only .docx is supported."
            )

        logger.debug("Checking %s", file_path)
        document = self._extractor.extract(file_path.read_bytes())
        return self._engine.analyze(document)
