"""Domain models: document snapshot, report and sample paper."""

from mla_checker.domain.models.document import (
    DocumentModel,
    Header,
    Indentation,
    ListInfo,
    Margins,
    PageSettings,
    PageSize,
    Paragraph,
    Run,
    Spacing,
    Style,
)
from mla_checker.domain.models.enums import (
    Alignment,
    CheckStatus,
    LineRule,
    Orientation,
    RuleCategory,
    Severity,
    StyleType,
)
from mla_checker.domain.models.paper import MLAPaper
from mla_checker.domain.models.report import (
    AnalysisReport,
    AnalysisSummary,
    CheckResult,
    RuleDefinition,
)

__all__ = [
    "Alignment",
    "AnalysisReport",
    "AnalysisSummary",
    "CheckResult",
    "CheckStatus",
    "DocumentModel",
    "Header",
    "Indentation",
    "LineRule",
    "ListInfo",
    "MLAPaper",
    "Margins",
    "Orientation",
    "PageSettings",
    "PageSize",
    "Paragraph",
    "RuleCategory",
    "RuleDefinition",
    "Run",
    "Severity",
    "Spacing",
    "Style",
    "StyleType",
]
