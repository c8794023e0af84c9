"""Word (.docx) renderer for MLA 9 sample papers."""

from __future__ import annotations

import logging
from pathlib import Path

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Inches, Pt

from mla_checker.domain.models.paper import MLAPaper
from mla_checker.domain.ports.document_renderer import DocumentRendererPort

logger = logging.getLogger(__name__)

FONT_NAME = "Times New Roman"
FONT_SIZE_PT = 12
LINE_SPACING = 2.0
MARGIN_INCHES = 1.0
INDENT_INCHES = 0.5
WORKS_CITED_HEADING = "Works Cited"


class DocxRenderer(DocumentRendererPort):
    """Generate MLA 9 formatted Word documents using python-docx.

    Every paragraph carries its spacing and indentation explicitly and
    every run its font, so the output is checkable without resolving
    style inheritance.
    """

    def render(self, paper: MLAPaper, output_path: Path) -> Path:
        """Build the paper and save it to *output_path*."""
        output_path = Path(output_path)
        if not output_path.suffix:
            output_path = output_path.with_suffix(".docx")

        docx = Document()
        self._setup_page_layout(docx, paper.surname)
        self._setup_default_style(docx)

        for line in (paper.student, paper.instructor, paper.course, paper.heading_date):
            self._add_paragraph(docx, line)

        title = self._add_paragraph(docx, paper.title)
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER

        for text in paper.body:
            body = self._add_paragraph(docx, text)
            body.paragraph_format.first_line_indent = Inches(INDENT_INCHES)

        if paper.works_cited:
            self._build_works_cited(docx, paper.works_cited)

        docx.save(str(output_path))
        logger.debug("Rendered %d body paragraphs to %s", len(paper.body), output_path)
        return output_path

    # ------------------------------------------------------------------
    # Page Layout
    # ------------------------------------------------------------------

    def _setup_page_layout(self, docx, surname: str) -> None:
        """Letter paper, 1-inch margins and the "Surname N" running header."""
        section = docx.sections[0]
        section.orientation = WD_ORIENT.PORTRAIT
        section.page_width = Inches(8.5)
        section.page_height = Inches(11)

        section.top_margin = Inches(MARGIN_INCHES)
        section.bottom_margin = Inches(MARGIN_INCHES)
        section.left_margin = Inches(MARGIN_INCHES)
        section.right_margin = Inches(MARGIN_INCHES)

        header = section.header
        header.is_linked_to_previous = False
        hp = header.paragraphs[0]
        hp.alignment = WD_ALIGN_PARAGRAPH.RIGHT
        self._style_run(hp.add_run(f"{surname} "))
        self._add_page_number_field(hp)

    def _add_page_number_field(self, paragraph) -> None:
        """Insert a simple PAGE field whose cached result is "1"."""
        field = paragraph._p.makeelement(qn("w:fldSimple"), {qn("w:instr"): " PAGE "})
        paragraph._p.append(field)

        run = paragraph.add_run("1")
        self._style_run(run)
        # add_run appends to the paragraph; move the run inside the field
        field.append(run._r)

    # ------------------------------------------------------------------
    # Default Style
    # ------------------------------------------------------------------

    @staticmethod
    def _setup_default_style(docx) -> None:
        style = docx.styles["Normal"]
        style.font.name = FONT_NAME
        style.font.size = Pt(FONT_SIZE_PT)

        pf = style.paragraph_format
        pf.line_spacing = LINE_SPACING
        pf.space_before = Pt(0)
        pf.space_after = Pt(0)

    # ------------------------------------------------------------------
    # Works Cited
    # ------------------------------------------------------------------

    def _build_works_cited(self, docx, entries: list[str]) -> None:
        """Centered heading on a new page, then hanging-indented entries."""
        heading = self._add_paragraph(docx, WORKS_CITED_HEADING)
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
        heading.paragraph_format.page_break_before = True

        for entry in entries:
            p = self._add_paragraph(docx, entry)
            p.paragraph_format.left_indent = Inches(INDENT_INCHES)
            p.paragraph_format.first_line_indent = Inches(-INDENT_INCHES)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _add_paragraph(self, docx, text: str):
        """Add a double-spaced paragraph holding one formatted run."""
        p = docx.add_paragraph()
        p.paragraph_format.line_spacing = LINE_SPACING
        p.paragraph_format.space_before = Pt(0)
        p.paragraph_format.space_after = Pt(0)
        self._style_run(p.add_run(text))
        return p

    @staticmethod
    def _style_run(run) -> None:
        run.font.name = FONT_NAME
        run.font.size = Pt(FONT_SIZE_PT)
