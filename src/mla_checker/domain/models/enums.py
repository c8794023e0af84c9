"""Enumerations for the document model and the compliance report."""

from enum import Enum


class Alignment(str, Enum):
    """Paragraph justification as written in the package."""

    LEFT = "left"
    START = "start"
    CENTER = "center"
    RIGHT = "right"
    END = "end"
    JUSTIFY = "justify"
    DISTRIBUTE = "distribute"


class LineRule(str, Enum):
    """How the ``line`` spacing value is interpreted."""

    AUTO = "auto"  # line is in 240ths of a line
    EXACT = "exact"  # line is in twips
    AT_LEAST = "atLeast"


class StyleType(str, Enum):
    """Kind of named style."""

    PARAGRAPH = "paragraph"
    CHARACTER = "character"
    TABLE = "table"
    NUMBERING = "numbering"


class Orientation(str, Enum):
    """Page orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class Severity(str, Enum):
    """How serious a failed rule is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class RuleCategory(str, Enum):
    """Grouping used by the rule catalog."""

    FORMATTING = "formatting"
    STRUCTURE = "structure"
    CITATIONS = "citations"
    PAGE_SETUP = "page-setup"


class CheckStatus(str, Enum):
    """Three-valued outcome of a rule check."""

    PASSED = "passed"
    FAILED = "failed"
    UNABLE_TO_VERIFY = "unable_to_verify"
