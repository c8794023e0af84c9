"""Individual MLA rule checks, grouped by concern."""

from mla_checker.validators.checks.citations import check_in_text_citations
from mla_checker.validators.checks.formatting import (
    check_excessive_formatting,
    check_first_line_indent,
    check_font,
    check_line_spacing,
    check_paragraph_alignment,
)
from mla_checker.validators.checks.page_setup import (
    check_header_format,
    check_margins,
    check_paper_size,
)
from mla_checker.validators.checks.structure import (
    check_alphabetical_order,
    check_hanging_indent,
    check_heading_format,
    check_title_formatting,
    check_works_cited,
)

__all__ = [
    "check_alphabetical_order",
    "check_excessive_formatting",
    "check_first_line_indent",
    "check_font",
    "check_hanging_indent",
    "check_header_format",
    "check_heading_format",
    "check_in_text_citations",
    "check_line_spacing",
    "check_margins",
    "check_paper_size",
    "check_paragraph_alignment",
    "check_title_formatting",
    "check_works_cited",
]
