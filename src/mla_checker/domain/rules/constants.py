"""MLA 9 checking constants: pure domain values.

Thresholds and patterns used by the rule checks. Distances are twips
(1440 per inch). These are fixed: reports must be reproducible, so the
heuristics are not configurable.
"""

import re

# ---------------------------------------------------------------------------
# Page setup
# ---------------------------------------------------------------------------

ONE_INCH_TWIPS: int = 1440
MARGIN_TOLERANCE_TWIPS: int = 72  # 0.05"

LETTER_WIDTH_TWIPS: int = 12240  # 8.5"
LETTER_HEIGHT_TWIPS: int = 15840  # 11"
PAPER_SIZE_TOLERANCE_TWIPS: int = 144  # 0.1"

# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------

REQUIRED_FONT_SIZE_PT: float = 12.0
FONT_SIZE_TOLERANCE_PT: float = 0.1

# Accepted half-point sizes outside this range are treated as unknown
MIN_FONT_SIZE_PT: float = 4.0
MAX_FONT_SIZE_PT: float = 72.0

TIMES_NEW_ROMAN_ALIASES: tuple[str, ...] = (
    "times new roman",
    "times",
    "tnr",
    "times nr",
    "times new roman mt",
    "times new roman ps",
)

# ---------------------------------------------------------------------------
# Spacing and indentation
# ---------------------------------------------------------------------------

DOUBLE_SPACING_LINE: int = 480
DOUBLE_SPACING_MIN: int = 450
DOUBLE_SPACING_MAX: int = 520
EXACT_SPACING_TOLERANCE: int = 50

HALF_INCH_TWIPS: int = 720
INDENT_TOLERANCE_TWIPS: int = 72

# ---------------------------------------------------------------------------
# Structure heuristics
# ---------------------------------------------------------------------------

POTENTIAL_TITLE_MAX_RANK: int = 3  # among the first N non-empty paragraphs
POTENTIAL_TITLE_MAX_CHARS: int = 100
CENTERED_TITLE_WINDOW: int = 5
FALLBACK_TITLE_WINDOW: int = 3

HEADING_BLOCK_WINDOW: int = 8
HEADING_BLOCK_LINES: int = 4
HEADING_BLOCK_MIN_SIGNALS: int = 3

EXCESSIVE_FORMATTING_LIMIT: int = 5
MIN_IN_TEXT_CITATIONS: int = 3

WORKS_CITED_MARKERS: tuple[str, ...] = ("works cited", "bibliography")

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

HEADER_PATTERN = re.compile(r"^[A-Za-z]+\s+\d+$", re.ASCII)
HEADER_NUMBER_PATTERN = re.compile(r"\d+", re.ASCII)

NAME_PATTERN = re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+")
INSTRUCTOR_PATTERN = re.compile(r"^(Dr\.|Mr\.|Ms\.|Mrs\.|Professor)\s+[A-Z]")
DATE_PATTERN = re.compile(
    r"\d{1,2}/\d{1,2}/\d{4}|\d{1,2} \w+ \d{4}|\w+ \d{1,2}, \d{4}",
    re.ASCII,
)

CITATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\([A-Za-z]+\s+\d+\)", re.ASCII),  # (Smith 123)
    re.compile(r"\([A-Za-z]+\)"),  # (Smith)
    re.compile(r"\(\".*?\"\)"),  # ("Title")
    re.compile(r"\([A-Za-z]+\s+et\s+al\.\s*\d*\)", re.ASCII),  # (Smith et al. 123)
)

LEADING_ARTICLES: tuple[str, ...] = ("a ", "an ", "the ")
