"""Composition Root: Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from mla_checker.config.loader import get_config, load_config
from mla_checker.config.models import MLAConfig
from mla_checker.domain.ports.compliance_checker import ComplianceCheckerPort
from mla_checker.domain.ports.document_extractor import DocumentExtractorPort
from mla_checker.domain.ports.document_renderer import DocumentRendererPort
from mla_checker.validators.engine import MLARulesEngine

from mla_checker.infrastructure.checkers.docx_checker import DocxComplianceChecker
from mla_checker.infrastructure.extractors.docx_extractor import DocxStructuralExtractor
from mla_checker.infrastructure.renderers.docx_renderer import DocxRenderer

from mla_checker.application.use_cases.analyze_document import AnalyzeDocumentUseCase
from mla_checker.application.use_cases.check_compliance import CheckComplianceUseCase
from mla_checker.application.use_cases.generate_demo import GenerateDemoUseCase


class Container:
    """Simple dependency injection container.

    Wires all infrastructure implementations to domain ports
    and provides pre-configured use cases.

    Usage::

        container = Container()
        report = container.check_compliance().execute(Path("paper.docx"))
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._config = load_config(config_path) if config_path else get_config()

        self._extractor = DocxStructuralExtractor()
        self._engine = MLARulesEngine(self._config)
        self._compliance_checker = DocxComplianceChecker(self._extractor, self._engine)
        self._docx_renderer = DocxRenderer()

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> MLAConfig:
        return self._config

    @property
    def extractor(self) -> DocumentExtractorPort:
        return self._extractor

    @property
    def engine(self) -> MLARulesEngine:
        return self._engine

    @property
    def compliance_checker(self) -> ComplianceCheckerPort:
        return self._compliance_checker

    @property
    def renderer(self) -> DocumentRendererPort:
        return self._docx_renderer

    # -- Use case factories --------------------------------------------------

    def check_compliance(self) -> CheckComplianceUseCase:
        return CheckComplianceUseCase(self._compliance_checker)

    def analyze_document(self) -> AnalyzeDocumentUseCase:
        return AnalyzeDocumentUseCase(self._extractor, self._engine)

    def generate_demo(self) -> GenerateDemoUseCase:
        return GenerateDemoUseCase()
