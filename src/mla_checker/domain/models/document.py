"""Normalized document model produced by the structural extractor.

Contains Run, Paragraph, Style, PageSettings, Header and DocumentModel:
the immutable snapshot the rule engine reads.

All distances are in twentieths of a point (twips, 1440 per inch). A field
left as ``None`` means the package did not say; it is never a stand-in for
a default value.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (typing)
- Pydantic (pragmatic exception for validation and serialization)
- Domain enums
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mla_checker.domain.models.enums import (
    Alignment,
    LineRule,
    Orientation,
    StyleType,
)

TWIPS_PER_INCH = 1440


def twips_to_inches(twips: int) -> float:
    """Convert twentieths of a point to inches."""
    return twips / TWIPS_PER_INCH


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Runs
# ---------------------------------------------------------------------------


class Run(_Frozen):
    """A span of paragraph text sharing one formatting set."""

    text: str = ""
    font_family: Optional[str] = None
    font_size: Optional[float] = Field(None, description="Points, already range-checked")
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Optional[str] = None

    @property
    def has_emphasis(self) -> bool:
        return self.bold or self.italic or self.underline


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------


class Indentation(_Frozen):
    """Explicit paragraph indentation (twips)."""

    left: Optional[int] = None
    right: Optional[int] = None
    first_line: Optional[int] = None
    hanging: Optional[int] = None


class Spacing(_Frozen):
    """Explicit paragraph spacing.

    ``before``/``after`` are twips; ``line`` is 240ths of a line for
    ``auto`` and twips otherwise (240 = single, 480 = double).
    """

    before: Optional[int] = None
    after: Optional[int] = None
    line: Optional[int] = None
    line_rule: Optional[LineRule] = None


class ListInfo(_Frozen):
    """Numbering attached to a list paragraph."""

    num_id: str
    level: int = 0
    num_format: Optional[str] = None  # bullet, decimal, ... when numbering.xml resolves it


class Paragraph(_Frozen):
    """One body paragraph, in document order."""

    index: int = Field(..., ge=0, description="0-based position in the body")
    text: str = ""
    style_id: Optional[str] = None
    alignment: Alignment = Alignment.LEFT
    indentation: Optional[Indentation] = None
    spacing: Optional[Spacing] = None
    runs: tuple[Run, ...] = ()
    list_info: Optional[ListInfo] = None

    @property
    def label(self) -> str:
        """Human-readable reference used in reports."""
        return f"Paragraph {self.index + 1}"

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    @property
    def is_centered(self) -> bool:
        return self.alignment == Alignment.CENTER


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


class Style(_Frozen):
    """A named formatting template (no inheritance is resolved)."""

    style_id: str
    name: str
    kind: StyleType = StyleType.PARAGRAPH
    font_family: Optional[str] = None
    font_size: Optional[float] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    line_spacing: Optional[int] = None
    first_line_indent: Optional[int] = None
    left_indent: Optional[int] = None
    right_indent: Optional[int] = None
    space_before: Optional[int] = None
    space_after: Optional[int] = None
    alignment: Alignment = Alignment.LEFT


# ---------------------------------------------------------------------------
# Page geometry
# ---------------------------------------------------------------------------


class Margins(_Frozen):
    """Page margins in twips."""

    top: int = TWIPS_PER_INCH
    bottom: int = TWIPS_PER_INCH
    left: int = TWIPS_PER_INCH
    right: int = TWIPS_PER_INCH


class PageSize(_Frozen):
    """Page dimensions in twips (defaults to US Letter)."""

    width: int = 12240
    height: int = 15840


class PageSettings(_Frozen):
    """Page geometry of the document's (last) section."""

    margins: Margins = Field(default_factory=Margins)
    page_size: PageSize = Field(default_factory=PageSize)
    orientation: Orientation = Orientation.PORTRAIT
    from_section: bool = Field(
        False, description="True when read from section properties, False for defaults"
    )


# ---------------------------------------------------------------------------
# Headers / footers
# ---------------------------------------------------------------------------


class Header(_Frozen):
    """Content of one header (or footer) part."""

    part_name: str
    content: str = ""
    paragraphs: tuple[Paragraph, ...] = ()


# ---------------------------------------------------------------------------
# Document (aggregate root)
# ---------------------------------------------------------------------------


class DocumentModel(_Frozen):
    """Immutable snapshot of one analyzed package."""

    paragraphs: tuple[Paragraph, ...] = ()
    styles: tuple[Style, ...] = ()
    page_settings: Optional[PageSettings] = None
    headers: tuple[Header, ...] = ()
    footers: tuple[Header, ...] = ()
    footnotes: tuple[str, ...] = ()

    @field_validator("paragraphs")
    @classmethod
    def _indices_follow_document_order(
        cls, paragraphs: tuple[Paragraph, ...]
    ) -> tuple[Paragraph, ...]:
        for position, paragraph in enumerate(paragraphs):
            if paragraph.index != position:
                raise ValueError(
                    f"paragraph at position {position} has index {paragraph.index}"
                )
        return paragraphs

    def non_empty_paragraphs(self) -> list[Paragraph]:
        """Paragraphs carrying visible text, in document order."""
        return [p for p in self.paragraphs if not p.is_empty]

    def default_style(self) -> Optional[Style]:
        """The style supplying document-default run formatting.

        "Normal" is preferred, then the first paragraph style.
        """
        paragraph_styles = [s for s in self.styles if s.kind == StyleType.PARAGRAPH]
        for style in paragraph_styles:
            if style.name == "Normal":
                return style
        return paragraph_styles[0] if paragraph_styles else None

    @property
    def text(self) -> str:
        """Plain text of all non-empty paragraphs, blank-line separated."""
        return "\n\n".join(p.text for p in self.non_empty_paragraphs())
