"""Document package extractors."""

from mla_checker.infrastructure.extractors.docx_extractor import DocxStructuralExtractor

__all__ = ["DocxStructuralExtractor"]
