"""Use Case: Analyze Uploaded Document.

For callers that hold the package in memory (uploads, pipes) rather
than a file on disk.
"""

from mla_checker.domain.models.report import AnalysisReport
from mla_checker.domain.ports.document_extractor import DocumentExtractorPort
from mla_checker.validators.engine import MLARulesEngine


class AnalyzeDocumentUseCase:
    """Extract a document model from bytes and evaluate it."""

    def __init__(self, extractor: DocumentExtractorPort, engine: MLARulesEngine) -> None:
        self._extractor = extractor
        self._engine = engine

    def execute(self, data: bytes) -> AnalysisReport:
        """Analyze the raw bytes of a .docx package.

        Raises:
            ParseError: If the package or its main document part is unreadable.
        """
        return self._engine.analyze(self._extractor.extract(data))
