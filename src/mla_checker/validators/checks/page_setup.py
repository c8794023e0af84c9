"""Page setup checks: margins, paper size and the running header."""

from __future__ import annotations

from mla_checker.domain.models.document import DocumentModel, twips_to_inches
from mla_checker.domain.models.enums import CheckStatus
from mla_checker.domain.models.report import CheckResult, RuleDefinition
from mla_checker.domain.rules.constants import (
    HEADER_NUMBER_PATTERN,
    HEADER_PATTERN,
    LETTER_HEIGHT_TWIPS,
    LETTER_WIDTH_TWIPS,
    MARGIN_TOLERANCE_TWIPS,
    ONE_INCH_TWIPS,
    PAPER_SIZE_TOLERANCE_TWIPS,
)
from mla_checker.validators.checks.base import make_result, status_for, within
from mla_checker.validators.heuristics import RIGHT_ALIGNMENTS


def check_margins(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    settings = document.page_settings
    if settings is None:
        return make_result(
            rule,
            CheckStatus.UNABLE_TO_VERIFY,
            "Could not determine page margin settings from document",
            [
                "Set all margins to 1 inch in Page Setup",
                "Ensure margin information is properly saved in document",
            ],
        )

    m = settings.margins
    passed = all(
        within(value, ONE_INCH_TWIPS, MARGIN_TOLERANCE_TWIPS)
        for value in (m.top, m.bottom, m.left, m.right)
    )
    return make_result(
        rule,
        status_for(passed),
        "All page margins are set to 1 inch"
        if passed
        else (
            "Page margins are not set to 1 inch "
            f'(Current: T:{twips_to_inches(m.top):.2f}", B:{twips_to_inches(m.bottom):.2f}", '
            f'L:{twips_to_inches(m.left):.2f}", R:{twips_to_inches(m.right):.2f}")'
        ),
        [
            "Set all margins to 1 inch in Page Layout > Margins",
            'Use Page Setup to manually set 1" margins for all sides',
        ],
    )


def check_paper_size(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    settings = document.page_settings
    if settings is None:
        return make_result(
            rule,
            CheckStatus.UNABLE_TO_VERIFY,
            "Could not determine paper size settings from document",
            [
                'Set paper size to 8.5" x 11" (Letter size)',
                "Check Page Layout > Size > Letter",
            ],
        )

    size = settings.page_size
    passed = within(size.width, LETTER_WIDTH_TWIPS, PAPER_SIZE_TOLERANCE_TWIPS) and within(
        size.height, LETTER_HEIGHT_TWIPS, PAPER_SIZE_TOLERANCE_TWIPS
    )
    return make_result(
        rule,
        status_for(passed),
        'Document is formatted for standard 8.5" x 11" paper size'
        if passed
        else (
            f'Paper size is {twips_to_inches(size.width):.1f}" x '
            f'{twips_to_inches(size.height):.1f}" instead of standard 8.5" x 11"'
        ),
        [
            'Change paper size to Letter (8.5" x 11")',
            'Use Page Layout > Size > Letter',
            "Ensure printer settings match document size",
        ],
    )


def check_header_format(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    """A right-aligned "Surname N" running header."""
    if not document.headers:
        return make_result(
            rule,
            CheckStatus.UNABLE_TO_VERIFY,
            "No header information found in document - unable to verify header format requirement",
            [
                "Add a header to your document with last name and page number",
                "Use Insert > Header & Footer to add header",
                'Format header as: "Last Name [space] [page number]" aligned to the right',
            ],
        )

    correct = False
    issues: list[str] = []
    for number, header in enumerate(document.headers, start=1):
        content = header.content.strip()
        if HEADER_PATTERN.match(content):
            if any(p.alignment in RIGHT_ALIGNMENTS for p in header.paragraphs):
                correct = True
            else:
                issues.append(
                    f"Header {number}: Contains name and page number but not right-aligned"
                )
        elif not content:
            issues.append(f"Header {number}: Empty header")
        elif not HEADER_NUMBER_PATTERN.search(content):
            issues.append(f"Header {number}: Missing page number")
        else:
            issues.append(f'Header {number}: Should follow format "Last Name [page number]"')

    if correct:
        return make_result(
            rule,
            CheckStatus.PASSED,
            "Header contains last name and page number, right-aligned",
        )
    return make_result(
        rule,
        CheckStatus.FAILED,
        f"Header format issues: {'; '.join(issues)}",
        [
            'Format header as "Last Name [space] [page number]"',
            "Right-align the header text",
            "Use Insert > Page Number to add automatic page numbering",
            'Example: "Smith 1" aligned to the right margin',
        ],
        ["Document header"],
    )
