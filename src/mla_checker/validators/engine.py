"""MLA 9 rule evaluation engine.

Runs every catalog rule over a DocumentModel and aggregates the results
into an AnalysisReport. The engine is stateless between calls: analyzing
the same document twice yields equal reports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from mla_checker.config.loader import get_config
from mla_checker.config.models import MLAConfig
from mla_checker.domain.models.document import DocumentModel
from mla_checker.domain.models.enums import RuleCategory
from mla_checker.domain.models.report import AnalysisReport, CheckResult, RuleDefinition
from mla_checker.validators.checks import (
    check_alphabetical_order,
    check_excessive_formatting,
    check_first_line_indent,
    check_font,
    check_hanging_indent,
    check_header_format,
    check_heading_format,
    check_in_text_citations,
    check_line_spacing,
    check_margins,
    check_paper_size,
    check_paragraph_alignment,
    check_title_formatting,
    check_works_cited,
)

logger = logging.getLogger(__name__)

_Check = Callable[[DocumentModel, RuleDefinition], CheckResult]

# Evaluation order; font-family and font-size share one pass over the runs.
_CHECKS: tuple[tuple[str, _Check], ...] = (
    ("line-spacing", check_line_spacing),
    ("margins", check_margins),
    ("first-line-indent", check_first_line_indent),
    ("paragraph-alignment", check_paragraph_alignment),
    ("header-format", check_header_format),
    ("heading-format", check_heading_format),
    ("paper-size", check_paper_size),
    ("title-formatting", check_title_formatting),
    ("excessive-formatting", check_excessive_formatting),
    ("works-cited", check_works_cited),
    ("hanging-indent-works-cited", check_hanging_indent),
    ("in-text-citations", check_in_text_citations),
    ("works-cited-alphabetical", check_alphabetical_order),
)


class MLARulesEngine:
    """Evaluate the MLA 9 rule catalog against a document model."""

    def __init__(self, config: Optional[MLAConfig] = None) -> None:
        self._config = config or get_config()
        self._rules: dict[str, RuleDefinition] = {r.id: r for r in self._config.rules}

    # -- Catalog --------------------------------------------------------------

    def get_rule(self, rule_id: str) -> RuleDefinition:
        """Return the catalog entry for *rule_id* (KeyError when absent)."""
        return self._rules[rule_id]

    def all_rules(self) -> list[RuleDefinition]:
        return list(self._rules.values())

    def rules_by_category(self, category: RuleCategory) -> list[RuleDefinition]:
        return [r for r in self._rules.values() if r.category == category]

    # -- Analysis -------------------------------------------------------------

    def analyze(self, document: DocumentModel) -> AnalysisReport:
        """Run every rule and build the report."""
        results: list[CheckResult] = check_font(
            document, self.get_rule("font-family"), self.get_rule("font-size")
        )
        for rule_id, check in _CHECKS:
            results.append(check(document, self.get_rule(rule_id)))

        for result in results:
            logger.debug("%s: %s (%s)", result.rule.id, result.status.value, result.details)

        report = AnalysisReport.from_results(results)
        logger.debug(
            "Analyzed %d paragraphs: score %d, %d passed, %d failed, %d unverifiable",
            len(document.paragraphs),
            report.overall_score,
            report.passed_rules,
            report.failed_rules,
            report.unverifiable_rules,
        )
        return report
