"""Parenthetical in-text citation check."""

from __future__ import annotations

from mla_checker.domain.models.document import DocumentModel, Paragraph
from mla_checker.domain.models.report import CheckResult, RuleDefinition
from mla_checker.domain.models.enums import CheckStatus
from mla_checker.domain.rules.constants import CITATION_PATTERNS, MIN_IN_TEXT_CITATIONS
from mla_checker.validators.checks.base import make_result


def count_citations(text: str) -> int:
    """Total matches of every citation shape in ``text``."""
    return sum(len(pattern.findall(text)) for pattern in CITATION_PATTERNS)


def _body_paragraphs(document: DocumentModel) -> list[Paragraph]:
    # Centered paragraphs are taken to be titles
    return [
        p
        for p in document.non_empty_paragraphs()
        if "works cited" not in p.text.lower() and not p.is_centered
    ]


def check_in_text_citations(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    counts = [count_citations(p.text) for p in _body_paragraphs(document)]
    total = sum(counts)
    with_citations = sum(1 for n in counts if n)

    if total == 0:
        return make_result(
            rule,
            CheckStatus.FAILED,
            "No in-text citations found in document",
            [
                "Add proper MLA in-text citations for all sources used",
                "Format as (Author Page) or (Author) for sources without page numbers",
                "Place citations before punctuation marks",
            ],
            ["Document body"],
        )
    if total < MIN_IN_TEXT_CITATIONS:
        return make_result(
            rule,
            CheckStatus.FAILED,
            f"Only {total} in-text citations found - may be insufficient for academic paper",
            [
                "Ensure all borrowed ideas, quotes, and paraphrases are cited",
                "Add more citations to support your arguments",
                "Check that citation format follows MLA guidelines",
            ],
            [f"{with_citations} paragraphs with citations"],
        )
    return make_result(
        rule,
        CheckStatus.PASSED,
        f"Found {total} in-text citations in {with_citations} paragraphs",
    )
