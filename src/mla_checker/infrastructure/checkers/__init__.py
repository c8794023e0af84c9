"""File-based compliance checkers."""

from mla_checker.infrastructure.checkers.docx_checker import DocxComplianceChecker

__all__ = ["DocxComplianceChecker"]
