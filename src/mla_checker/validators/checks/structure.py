"""Structure checks: heading block, title and the Works Cited page."""

from __future__ import annotations

from mla_checker.domain.models.document import DocumentModel
from mla_checker.domain.models.enums import CheckStatus
from mla_checker.domain.models.report import CheckResult, RuleDefinition
from mla_checker.domain.rules.constants import (
    DATE_PATTERN,
    HALF_INCH_TWIPS,
    HEADING_BLOCK_LINES,
    HEADING_BLOCK_MIN_SIGNALS,
    HEADING_BLOCK_WINDOW,
    INDENT_TOLERANCE_TWIPS,
    INSTRUCTOR_PATTERN,
    NAME_PATTERN,
)
from mla_checker.validators.checks.base import make_result, status_for, within
from mla_checker.validators.heuristics import (
    LEFT_ALIGNMENTS,
    find_title,
    find_works_cited,
    sort_key,
    works_cited_entries,
)

# ---------------------------------------------------------------------------
# MLA heading block
# ---------------------------------------------------------------------------


def check_heading_format(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    """Name, instructor, course and date on the first lines of page one.

    Four signals are scored over the first four non-empty paragraphs;
    three are enough to pass.
    """
    candidates = [p for p in document.paragraphs[:HEADING_BLOCK_WINDOW] if not p.is_empty]

    if len(candidates) < HEADING_BLOCK_LINES:
        return make_result(
            rule,
            CheckStatus.FAILED,
            "MLA heading format not found - document should start with name, instructor, "
            "course, and date on separate lines",
            [
                "Add MLA heading at the beginning of your document",
                "Format: Student Name (line 1), Instructor Name (line 2), Course (line 3), "
                "Date (line 4)",
                "All heading lines should be left-aligned and double-spaced",
            ],
            ["Document beginning"],
        )

    block = candidates[:HEADING_BLOCK_LINES]
    lines = [p.text.strip() for p in block]

    has_name = bool(NAME_PATTERN.match(lines[0]))
    has_instructor = bool(INSTRUCTOR_PATTERN.match(lines[1]))
    has_date = any(DATE_PATTERN.search(line) for line in lines)
    is_left_aligned = all(p.alignment in LEFT_ALIGNMENTS for p in block)

    signals = sum((has_name, has_instructor, has_date, is_left_aligned))
    if signals >= HEADING_BLOCK_MIN_SIGNALS:
        return make_result(rule, CheckStatus.PASSED, "Document contains proper MLA heading format")

    issues = []
    if not has_name:
        issues.append("Student name not found or improperly formatted")
    if not has_instructor:
        issues.append('Instructor name not found (should include title like "Dr." or "Professor")')
    if not has_date:
        issues.append("Date not found or improperly formatted")
    if not is_left_aligned:
        issues.append("Heading should be left-aligned")

    return make_result(
        rule,
        CheckStatus.FAILED,
        f"MLA heading issues: {'; '.join(issues)}",
        [
            "Format heading as: Student Name, Instructor Name (with title), Course Name, Date",
            "Each item should be on a separate line, left-aligned",
            "Example: John Smith, Dr. Johnson, English 101, 15 March 2024",
        ],
        [p.label for p in block],
    )


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------


def check_title_formatting(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    title = find_title(document.paragraphs)
    if title is None:
        return make_result(
            rule,
            CheckStatus.FAILED,
            "No clear title found in document",
            [
                "Add a centered title to your document",
                "Title should be in the same font as body text, centered",
            ],
        )

    emphasized = any(run.has_emphasis for run in title.runs)
    passed = title.is_centered and not emphasized

    problems = []
    if not title.is_centered:
        problems.append("not centered")
    if emphasized:
        problems.append("has excessive formatting")

    return make_result(
        rule,
        status_for(passed),
        "Title is properly centered with no excessive formatting"
        if passed
        else f"Title formatting issues: {', '.join(problems)}",
        [
            "Center the title using Ctrl+E or Format > Paragraph > Center",
            "Remove bold, italic, or underline formatting from title",
            "Title should use same font and size as body text",
        ],
        [title.label],
    )


# ---------------------------------------------------------------------------
# Works Cited
# ---------------------------------------------------------------------------


def check_works_cited(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    present = find_works_cited(document.paragraphs) is not None
    return make_result(
        rule,
        status_for(present),
        "Document includes a Works Cited section" if present else "No Works Cited section found",
        [
            "Add a Works Cited page at the end of your document",
            "List all sources used in your paper",
            "Format citations according to MLA guidelines",
        ],
    )


def check_hanging_indent(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    heading = find_works_cited(document.paragraphs)
    if heading is None:
        return make_result(
            rule,
            CheckStatus.UNABLE_TO_VERIFY,
            "No Works Cited section found - unable to verify hanging indent formatting",
            [
                "Add a Works Cited page to your document",
                "Format Works Cited entries with hanging indent (0.5 inch)",
            ],
        )

    entries = works_cited_entries(document.paragraphs, heading)
    if not entries:
        return make_result(
            rule,
            CheckStatus.FAILED,
            "Works Cited page found but contains no citations",
            [
                "Add citations to your Works Cited page",
                "Format each citation with hanging indent (0.5 inch)",
            ],
            [heading.label],
        )

    correct = sum(
        1
        for entry in entries
        if entry.indentation is not None
        and entry.indentation.hanging
        and within(entry.indentation.hanging, HALF_INCH_TWIPS, INDENT_TOLERANCE_TWIPS)
    )

    if correct == len(entries):
        return make_result(
            rule,
            CheckStatus.PASSED,
            f"All {len(entries)} Works Cited entries have proper hanging indent",
        )
    if correct:
        return make_result(
            rule,
            CheckStatus.FAILED,
            f"Only {correct} of {len(entries)} Works Cited entries have hanging indent",
            [
                "Apply hanging indent (0.5 inch) to all Works Cited entries",
                "Select citations and use Format > Paragraph > Indentation: Hanging",
            ],
            ["Works Cited entries"],
        )
    return make_result(
        rule,
        CheckStatus.FAILED,
        "Works Cited entries do not have hanging indent formatting",
        [
            "Format all Works Cited entries with 0.5-inch hanging indent",
            'Select citations and use Format > Paragraph > Indentation: Hanging: 0.5"',
            "First line should be flush left, subsequent lines indented",
        ],
        ["Works Cited entries"],
    )


def check_alphabetical_order(document: DocumentModel, rule: RuleDefinition) -> CheckResult:
    heading = find_works_cited(document.paragraphs)
    entries = works_cited_entries(document.paragraphs, heading) if heading else []
    if not entries:
        return make_result(
            rule,
            CheckStatus.UNABLE_TO_VERIFY,
            "No Works Cited entries found - unable to verify alphabetical order",
            ["Add a Works Cited page listing your sources alphabetically"],
        )

    out_of_order = [
        current.label
        for previous, current in zip(entries, entries[1:])
        if sort_key(current.text) < sort_key(previous.text)
    ]
    passed = not out_of_order
    return make_result(
        rule,
        status_for(passed),
        f"All {len(entries)} Works Cited entries are in alphabetical order"
        if passed
        else f"Found {len(out_of_order)} Works Cited entries out of alphabetical order",
        [
            "Sort Works Cited entries alphabetically by the first word of each entry",
            'Ignore leading articles ("A", "An", "The") when alphabetizing',
        ],
        out_of_order,
    )
