"""Text formatting checks: font, line spacing, indentation, alignment, emphasis."""

from __future__ import annotations

from mla_checker.domain.models.document import DocumentModel, Paragraph
from mla_checker.domain.models.enums import CheckStatus, LineRule
from mla_checker.domain.models.report import CheckResult, RuleDefinition
from mla_checker.domain.rules.constants import (
    DOUBLE_SPACING_LINE,
    DOUBLE_SPACING_MAX,
    DOUBLE_SPACING_MIN,
    EXACT_SPACING_TOLERANCE,
    EXCESSIVE_FORMATTING_LIMIT,
    FONT_SIZE_TOLERANCE_PT,
    HALF_INCH_TWIPS,
    INDENT_TOLERANCE_TWIPS,
    REQUIRED_FONT_SIZE_PT,
    TIMES_NEW_ROMAN_ALIASES,
)
from mla_checker.validators.checks.base import AffectedElements, make_result, status_for, within
from mla_checker.validators.heuristics import (
    LEFT_ALIGNMENTS,
    find_title,
    find_works_cited,
    potential_title_indices,
    works_cited_indices,
)


def is_times_new_roman(font_family: str) -> bool:
    """Case-insensitive substring match against the Times New Roman aliases."""
    normalized = font_family.lower().strip()
    if not normalized:
        return False
    return any(alias in normalized for alias in TIMES_NEW_ROMAN_ALIASES)


def is_double_spaced(paragraph: Paragraph) -> bool:
    """Whether the paragraph's explicit spacing amounts to double spacing.

    ``auto`` (and an unset or ``atLeast`` rule) accepts 450–520 in 240ths
    of a line; ``exact`` accepts 480 twips ± 50.
    """
    spacing = paragraph.spacing
    if spacing is None or spacing.line is None:
        return False
    if spacing.line_rule == LineRule.EXACT:
        return within(spacing.line, DOUBLE_SPACING_LINE, EXACT_SPACING_TOLERANCE)
    return DOUBLE_SPACING_MIN <= spacing.line <= DOUBLE_SPACING_MAX


# ---------------------------------------------------------------------------
# Font family / size
# ---------------------------------------------------------------------------


def check_font(
    document: DocumentModel,
    family_rule: RuleDefinition,
    size_rule: RuleDefinition,
) -> list[CheckResult]:
    """Font family and font size, resolved per run against the default style."""
    default = document.default_style()
    default_family = default.font_family if default else None
    default_size = default.font_size if default else None

    total_runs = 0
    explicit_families = 0
    explicit_sizes = 0
    wrong_families = 0
    wrong_sizes = 0
    family_affected = AffectedElements()
    size_affected = AffectedElements()

    for paragraph in document.paragraphs:
        for run in paragraph.runs:
            total_runs += 1

            if run.font_family:
                explicit_families += 1
            family = run.font_family or default_family
            if family and not is_times_new_roman(family):
                wrong_families += 1
                family_affected.add(paragraph.label)

            if run.font_size is not None:
                explicit_sizes += 1
            size = run.font_size if run.font_size is not None else default_size
            if size is not None and not within(size, REQUIRED_FONT_SIZE_PT, FONT_SIZE_TOLERANCE_PT):
                wrong_sizes += 1
                size_affected.add(paragraph.label)

    results = []

    if explicit_families == 0 and default_family is None:
        results.append(
            make_result(
                family_rule,
                CheckStatus.UNABLE_TO_VERIFY,
                f"No font family information found in {total_runs} text runs - "
                "unable to verify Times New Roman requirement",
                [
                    "Explicitly set Times New Roman as font family for all text",
                    "Use Format > Font to set Times New Roman as default font",
                    "Ensure font family information is properly saved in the document",
                ],
            )
        )
    else:
        passed = wrong_families == 0
        default_note = "1 default" if default_family else "0 default"
        results.append(
            make_result(
                family_rule,
                status_for(passed),
                f"All text uses Times New Roman font family (checked {explicit_families} "
                f"explicit + {default_note} font definitions)"
                if passed
                else f"Found {wrong_families} instances of non-Times New Roman fonts",
                [
                    "Change all fonts to Times New Roman",
                    "Use Format > Font to set Times New Roman as default",
                ],
                family_affected,
            )
        )

    if explicit_sizes == 0 and default_size is None:
        results.append(
            make_result(
                size_rule,
                CheckStatus.UNABLE_TO_VERIFY,
                f"No font size information found in {total_runs} text runs - "
                "unable to verify 12pt requirement",
                [
                    "Explicitly set 12pt font size for all text",
                    "Use Format > Font to set 12pt as default font size",
                    "Ensure font size information is properly saved in the document",
                ],
            )
        )
    else:
        passed = wrong_sizes == 0
        default_note = "1 default" if default_size is not None else "0 default"
        results.append(
            make_result(
                size_rule,
                status_for(passed),
                f"All text uses 12-point font size (checked {explicit_sizes} explicit + "
                f"{default_note} font size definitions)"
                if passed
                else f"Found {wrong_sizes} instances of incorrect font sizes (expected 12pt)",
                [
                    "Set all text to 12-point font size",
                    "Use Format > Font to set 12pt as default font size",
                ],
                size_affected,
            )
        )

    return results


# ---------------------------------------------------------------------------
# Line spacing
# ---------------------------------------------------------------------------


def check_line_spacing(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    total = 0
    no_info = 0
    affected = AffectedElements()

    for paragraph in document.non_empty_paragraphs():
        total += 1
        if paragraph.spacing is None:
            no_info += 1
        elif not is_double_spaced(paragraph):
            affected.add(paragraph.label)

    if no_info > total / 2:
        return make_result(
            rule,
            CheckStatus.UNABLE_TO_VERIFY,
            f"No line spacing information found in {no_info}/{total} paragraphs - "
            "unable to verify double-spacing requirement",
            [
                "Explicitly set double-spacing (2.0) for all paragraphs",
                "Use Format > Paragraph > Line spacing: Double",
                "Ensure spacing information is properly saved in document",
            ],
        )

    passed = len(affected) == 0
    return make_result(
        rule,
        status_for(passed),
        f"Document uses double-spacing throughout (verified {total - no_info}/{total} paragraphs)"
        if passed
        else f"Found {len(affected)} paragraphs with incorrect line spacing",
        [
            'Set line spacing to "Double" for all paragraphs',
            "Use Format > Paragraph > Line spacing: Double",
        ],
        affected,
    )


# ---------------------------------------------------------------------------
# First-line indent
# ---------------------------------------------------------------------------


def check_first_line_indent(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    """0.5" first-line indent on body paragraphs.

    Centered paragraphs are presumed titles; the Works Cited section uses
    hanging indents and is judged by its own rule.
    """
    excluded = works_cited_indices(document.paragraphs)
    total = 0
    no_info = 0
    affected = AffectedElements()

    for paragraph in document.non_empty_paragraphs():
        if paragraph.is_centered or paragraph.index in excluded:
            continue
        total += 1
        indentation = paragraph.indentation
        if indentation is None or indentation.first_line is None:
            no_info += 1
        elif not within(indentation.first_line, HALF_INCH_TWIPS, INDENT_TOLERANCE_TWIPS):
            affected.add(paragraph.label)

    if no_info > total / 2:
        return make_result(
            rule,
            CheckStatus.UNABLE_TO_VERIFY,
            f"No indentation information found in {no_info}/{total} body paragraphs - "
            'unable to verify 0.5" first-line indent requirement',
            [
                "Explicitly set first-line indent to 0.5 inches for all body paragraphs",
                'Use Format > Paragraph > Indentation: First line: 0.5"',
                "Ensure indentation information is properly saved in document",
            ],
        )

    passed = len(affected) == 0
    return make_result(
        rule,
        status_for(passed),
        "All paragraphs have correct 0.5-inch first-line indent "
        f"(verified {total - no_info}/{total} paragraphs)"
        if passed
        else f"Found {len(affected)} paragraphs without proper first-line indent",
        [
            "Set first-line indent to 0.5 inches for all body paragraphs",
            'Use Format > Paragraph > Indentation: First line: 0.5"',
        ],
        affected,
    )


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------


def _title_like_indices(document: DocumentModel) -> set[int]:
    indices = potential_title_indices(document.paragraphs)
    title = find_title(document.paragraphs)
    if title is not None:
        indices.add(title.index)
    return indices


def check_paragraph_alignment(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    exempt = _title_like_indices(document)
    works_cited = find_works_cited(document.paragraphs)
    if works_cited is not None:
        exempt.add(works_cited.index)

    affected = AffectedElements()
    for paragraph in document.non_empty_paragraphs():
        if paragraph.index in exempt:
            continue
        if paragraph.alignment not in LEFT_ALIGNMENTS:
            affected.add(paragraph.label)

    passed = len(affected) == 0
    return make_result(
        rule,
        status_for(passed),
        "All body paragraphs are properly left-aligned"
        if passed
        else f"Found {len(affected)} paragraphs with incorrect alignment",
        [
            "Set paragraph alignment to left for all body text",
            "Use Ctrl+L or Format > Paragraph > Alignment: Left",
        ],
        affected,
    )


# ---------------------------------------------------------------------------
# Excessive formatting
# ---------------------------------------------------------------------------


def check_excessive_formatting(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    """Count bold/italic/underline runs outside the title and Works Cited."""
    exempt = _title_like_indices(document) | works_cited_indices(document.paragraphs)

    count = 0
    affected = AffectedElements()
    for paragraph in document.paragraphs:
        if paragraph.index in exempt:
            continue
        for run in paragraph.runs:
            if run.has_emphasis:
                count += 1
                affected.add(paragraph.label)

    passed = count <= EXCESSIVE_FORMATTING_LIMIT
    return make_result(
        rule,
        status_for(passed),
        "Appropriate use of text formatting"
        if passed
        else f"Found {count} instances of bold/italic/underline formatting",
        [
            "Minimize use of bold, italic, and underline formatting",
            "MLA style prefers minimal text formatting",
            "Consider removing unnecessary formatting",
        ],
        affected,
    )
