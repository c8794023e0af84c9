"""Application use cases."""

from mla_checker.application.use_cases.analyze_document import AnalyzeDocumentUseCase
from mla_checker.application.use_cases.check_compliance import CheckComplianceUseCase
from mla_checker.application.use_cases.generate_demo import GenerateDemoUseCase

__all__ = ["AnalyzeDocumentUseCase", "CheckComplianceUseCase", "GenerateDemoUseCase"]
