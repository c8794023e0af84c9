"""DOCX structural extractor, implements DocumentExtractorPort.

Decompresses a .docx package, parses its parts with lxml and projects them
into the immutable DocumentModel. Only ``word/document.xml`` is mandatory;
every other part degrades to "unknown" when absent or broken.
"""

from __future__ import annotations

import io
import logging
import math
import posixpath
import re
import zipfile
import zlib
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from mla_checker.domain.errors import ParseError
from mla_checker.domain.models.document import (
    DocumentModel,
    Header,
    Indentation,
    ListInfo,
    Margins,
    PageSettings,
    PageSize,
    Paragraph,
    Run,
    Spacing,
    Style,
)
from mla_checker.domain.models.enums import Alignment, LineRule, Orientation, StyleType
from mla_checker.domain.ports.document_extractor import DocumentExtractorPort
from mla_checker.domain.rules.constants import MAX_FONT_SIZE_PT, MIN_FONT_SIZE_PT
from mla_checker.infrastructure.extractors.ooxml import (
    NS,
    element_text,
    find,
    is_on,
    parse_xml,
    to_int,
    w_attr,
)

logger = logging.getLogger(__name__)

DOCUMENT_PART = "word/document.xml"
STYLES_PART = "word/styles.xml"
SETTINGS_PART = "word/settings.xml"
NUMBERING_PART = "word/numbering.xml"
FOOTNOTES_PART = "word/footnotes.xml"
RELATIONSHIPS_PART = "word/_rels/document.xml.rels"

_OPTIONAL_PARTS = (STYLES_PART, SETTINGS_PART, NUMBERING_PART, FOOTNOTES_PART)

# Runs directly in the paragraph plus those wrapped by inline containers
_RUN_XPATH = (
    "./w:r | ./w:hyperlink/w:r | ./w:fldSimple/w:r | ./w:smartTag/w:r | ./w:ins/w:r"
)
_HEADER_PARAGRAPH_XPATH = "./w:p | ./w:sdt/w:sdtContent/w:p"

_ALIGNMENT_ALIASES = {
    "both": Alignment.JUSTIFY,
    "lowKashida": Alignment.JUSTIFY,
    "mediumKashida": Alignment.JUSTIFY,
    "highKashida": Alignment.JUSTIFY,
    "thaiDistribute": Alignment.DISTRIBUTE,
}

_READ_ERRORS = (
    KeyError,
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    RuntimeError,
    NotImplementedError,
    OSError,
)


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------


def parse_font_size(value: Optional[str]) -> Optional[float]:
    """Convert a half-point ``w:sz`` value to points.

    Non-numeric, non-positive or out-of-range (4pt–72pt) values are
    rejected as unknown.
    """
    if not value:
        return None
    try:
        half_points = float(value)
    except ValueError:
        return None
    if not math.isfinite(half_points) or half_points <= 0:
        return None
    points = half_points / 2
    if points < MIN_FONT_SIZE_PT or points > MAX_FONT_SIZE_PT:
        return None
    return points


def parse_alignment(value: Optional[str]) -> Alignment:
    """Map a ``w:jc`` value; absence means the structural default, left."""
    if not value:
        return Alignment.LEFT
    if value in _ALIGNMENT_ALIASES:
        return _ALIGNMENT_ALIASES[value]
    try:
        return Alignment(value)
    except ValueError:
        logger.debug("Unrecognised alignment %r treated as left", value)
        return Alignment.LEFT


def parse_line_rule(value: Optional[str]) -> Optional[LineRule]:
    if not value:
        return None
    try:
        return LineRule(value)
    except ValueError:
        return None


def _font_family(rpr: Optional[etree._Element]) -> Optional[str]:
    fonts = find(rpr, "w:rFonts")
    return w_attr(fonts, "ascii") or w_attr(fonts, "hAnsi")


def _underline(rpr: Optional[etree._Element]) -> bool:
    return is_on(find(rpr, "w:u"))


def _resolve_target(target: str) -> str:
    """Turn a relationship target into an archive path."""
    if target.startswith("/"):
        return target[1:]
    return posixpath.normpath(posixpath.join("word", target))


# ---------------------------------------------------------------------------
# Extractor
# ---------------------------------------------------------------------------


class DocxStructuralExtractor(DocumentExtractorPort):
    """Build a DocumentModel from the bytes of a .docx package.

    Part parses run concurrently on a thread pool; the main document parse
    must succeed, the optional ones are each allowed to fail on their own.
    """

    def __init__(self, max_workers: Optional[int] = None) -> None:
        self._max_workers = max_workers

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract_file(self, path: Union[str, Path]) -> DocumentModel:
        """Read *path* and extract it."""
        return self.extract(Path(path).read_bytes())

    def extract(self, data: bytes) -> DocumentModel:
        """Parse *data* into a DocumentModel or raise ParseError."""
        blobs, names = self._read_parts(data)
        trees = self._parse_parts(blobs)

        document = trees[DOCUMENT_PART]
        body = find(document, "w:body")

        numbering = self._numbering_formats(trees.get(NUMBERING_PART))
        paragraphs = self._extract_paragraphs(body, numbering)
        styles = self._extract_styles(trees.get(STYLES_PART))
        page_settings = self._extract_page_settings(body, trees.get(SETTINGS_PART) is not None)
        headers = self._extract_headers(trees, names["header"])
        footers = self._extract_headers(trees, names["footer"])
        footnotes = self._extract_footnotes(trees.get(FOOTNOTES_PART))

        logger.debug(
            "Extracted %d paragraphs, %d styles, %d headers, %d footers",
            len(paragraphs),
            len(styles),
            len(headers),
            len(footers),
        )
        return DocumentModel(
            paragraphs=tuple(paragraphs),
            styles=tuple(styles),
            page_settings=page_settings,
            headers=tuple(headers),
            footers=tuple(footers),
            footnotes=tuple(footnotes),
        )

    # ------------------------------------------------------------------
    # Archive access
    # ------------------------------------------------------------------

    def _read_parts(self, data: bytes) -> tuple[dict[str, bytes], dict[str, list[str]]]:
        """Read the raw bytes of every part the model is built from."""
        try:
            archive = zipfile.ZipFile(io.BytesIO(data))
        except (zipfile.BadZipFile, OSError, ValueError) as exc:
            raise ParseError(f"Failed to parse DOCX file: not a valid package ({exc})") from exc

        with archive:
            available = set(archive.namelist())
            if DOCUMENT_PART not in available:
                raise ParseError(f"Invalid DOCX file: {DOCUMENT_PART} not found")
            try:
                blobs = {DOCUMENT_PART: archive.read(DOCUMENT_PART)}
            except _READ_ERRORS as exc:
                raise ParseError(f"Failed to read {DOCUMENT_PART}: {exc}") from exc

            for name in _OPTIONAL_PARTS:
                blob = self._read_optional(archive, name, available)
                if blob is not None:
                    blobs[name] = blob

            rels_tree = None
            rels_blob = self._read_optional(archive, RELATIONSHIPS_PART, available)
            if rels_blob is not None:
                try:
                    rels_tree = parse_xml(rels_blob)
                except (etree.XMLSyntaxError, ValueError) as exc:
                    logger.warning("Ignoring unparsable part %s: %s", RELATIONSHIPS_PART, exc)

            names = {
                kind: self._related_parts(rels_tree, available, kind)
                for kind in ("header", "footer")
            }
            for name in names["header"] + names["footer"]:
                blob = self._read_optional(archive, name, available)
                if blob is not None:
                    blobs[name] = blob

        return blobs, names

    @staticmethod
    def _read_optional(
        archive: zipfile.ZipFile, name: str, available: set[str]
    ) -> Optional[bytes]:
        if name not in available:
            return None
        try:
            return archive.read(name)
        except _READ_ERRORS as exc:
            logger.warning("Ignoring unreadable part %s: %s", name, exc)
            return None

    @staticmethod
    def _related_parts(
        rels_tree: Optional[etree._Element], available: set[str], kind: str
    ) -> list[str]:
        """Header or footer part names, via the manifest when there is one."""
        if rels_tree is not None:
            targets = {
                _resolve_target(rel.get("Target", ""))
                for rel in rels_tree.findall("rel:Relationship", NS)
                if (rel.get("Type") or "").endswith(f"/{kind}")
                and rel.get("TargetMode") != "External"
            }
        else:
            pattern = re.compile(rf"word/{kind}\d*\.xml")
            targets = {name for name in available if pattern.fullmatch(name)}
        return sorted(t for t in targets if t in available)

    def _parse_parts(self, blobs: dict[str, bytes]) -> dict[str, etree._Element]:
        """Parse all parts concurrently; only the main document may fail loudly."""
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = {name: executor.submit(parse_xml, blob) for name, blob in blobs.items()}

        trees: dict[str, etree._Element] = {}
        for name, future in futures.items():
            try:
                trees[name] = future.result()
            except (etree.XMLSyntaxError, ValueError) as exc:
                if name == DOCUMENT_PART:
                    raise ParseError(f"Failed to parse DOCX file: malformed {name} ({exc})") from exc
                logger.warning("Ignoring unparsable part %s: %s", name, exc)
        return trees

    # ------------------------------------------------------------------
    # Paragraphs and runs
    # ------------------------------------------------------------------

    def _extract_paragraphs(
        self,
        body: Optional[etree._Element],
        numbering: dict[tuple[str, int], str],
    ) -> list[Paragraph]:
        if body is None:
            return []
        return [
            self._parse_paragraph(index, p, numbering)
            for index, p in enumerate(body.findall("w:p", NS))
        ]

    def _parse_paragraph(
        self,
        index: int,
        p: etree._Element,
        numbering: Optional[dict[tuple[str, int], str]] = None,
    ) -> Paragraph:
        runs = tuple(self._parse_run(r) for r in p.xpath(_RUN_XPATH, namespaces=NS))
        ppr = find(p, "w:pPr")

        ind = find(ppr, "w:ind")
        indentation = None
        if ind is not None:
            indentation = Indentation(
                left=to_int(w_attr(ind, "left") or w_attr(ind, "start")),
                right=to_int(w_attr(ind, "right") or w_attr(ind, "end")),
                first_line=to_int(w_attr(ind, "firstLine")),
                hanging=to_int(w_attr(ind, "hanging")),
            )

        sp = find(ppr, "w:spacing")
        spacing = None
        if sp is not None:
            spacing = Spacing(
                before=to_int(w_attr(sp, "before")),
                after=to_int(w_attr(sp, "after")),
                line=to_int(w_attr(sp, "line")),
                line_rule=parse_line_rule(w_attr(sp, "lineRule")),
            )

        return Paragraph(
            index=index,
            text="".join(run.text for run in runs),
            style_id=w_attr(find(ppr, "w:pStyle"), "val"),
            alignment=parse_alignment(w_attr(find(ppr, "w:jc"), "val")),
            indentation=indentation,
            spacing=spacing,
            runs=runs,
            list_info=self._list_info(ppr, numbering or {}),
        )

    @staticmethod
    def _parse_run(r: etree._Element) -> Run:
        rpr = find(r, "w:rPr")
        return Run(
            text="".join(t.text or "" for t in r.findall("w:t", NS)),
            font_family=_font_family(rpr),
            font_size=parse_font_size(w_attr(find(rpr, "w:sz"), "val")),
            bold=is_on(find(rpr, "w:b")),
            italic=is_on(find(rpr, "w:i")),
            underline=_underline(rpr),
            color=w_attr(find(rpr, "w:color"), "val"),
        )

    @staticmethod
    def _list_info(
        ppr: Optional[etree._Element], numbering: dict[tuple[str, int], str]
    ) -> Optional[ListInfo]:
        num_pr = find(ppr, "w:numPr")
        num_id = w_attr(find(num_pr, "w:numId"), "val")
        if not num_id or num_id == "0":
            return None
        level = to_int(w_attr(find(num_pr, "w:ilvl"), "val")) or 0
        return ListInfo(num_id=num_id, level=level, num_format=numbering.get((num_id, level)))

    @staticmethod
    def _numbering_formats(tree: Optional[etree._Element]) -> dict[tuple[str, int], str]:
        """Map (numId, level) to the level's number format."""
        if tree is None:
            return {}
        abstract: dict[str, dict[int, str]] = {}
        for abstract_num in tree.findall("w:abstractNum", NS):
            levels = abstract.setdefault(w_attr(abstract_num, "abstractNumId") or "", {})
            for lvl in abstract_num.findall("w:lvl", NS):
                ilvl = to_int(w_attr(lvl, "ilvl"))
                fmt = w_attr(find(lvl, "w:numFmt"), "val")
                if ilvl is not None and fmt:
                    levels[ilvl] = fmt

        formats: dict[tuple[str, int], str] = {}
        for num in tree.findall("w:num", NS):
            num_id = w_attr(num, "numId")
            abstract_id = w_attr(find(num, "w:abstractNumId"), "val")
            if num_id is None or abstract_id is None:
                continue
            for ilvl, fmt in abstract.get(abstract_id, {}).items():
                formats[(num_id, ilvl)] = fmt
        return formats

    # ------------------------------------------------------------------
    # Styles
    # ------------------------------------------------------------------

    @staticmethod
    def _extract_styles(tree: Optional[etree._Element]) -> list[Style]:
        if tree is None:
            return []
        styles = []
        for style in tree.findall("w:style", NS):
            style_id = w_attr(style, "styleId") or ""
            try:
                kind = StyleType(w_attr(style, "type") or "paragraph")
            except ValueError:
                logger.debug("Skipping style %s of unknown type", style_id)
                continue
            rpr = find(style, "w:rPr")
            ppr = find(style, "w:pPr")
            spacing = find(ppr, "w:spacing")
            ind = find(ppr, "w:ind")
            styles.append(
                Style(
                    style_id=style_id,
                    name=w_attr(find(style, "w:name"), "val") or style_id,
                    kind=kind,
                    font_family=_font_family(rpr),
                    font_size=parse_font_size(w_attr(find(rpr, "w:sz"), "val")),
                    bold=is_on(find(rpr, "w:b")),
                    italic=is_on(find(rpr, "w:i")),
                    underline=_underline(rpr),
                    line_spacing=to_int(w_attr(spacing, "line")),
                    first_line_indent=to_int(w_attr(ind, "firstLine")),
                    left_indent=to_int(w_attr(ind, "left") or w_attr(ind, "start")),
                    right_indent=to_int(w_attr(ind, "right") or w_attr(ind, "end")),
                    space_before=to_int(w_attr(spacing, "before")),
                    space_after=to_int(w_attr(spacing, "after")),
                    alignment=parse_alignment(w_attr(find(ppr, "w:jc"), "val")),
                )
            )
        return styles

    # ------------------------------------------------------------------
    # Page settings
    # ------------------------------------------------------------------

    @staticmethod
    def _extract_page_settings(
        body: Optional[etree._Element], has_settings_part: bool
    ) -> Optional[PageSettings]:
        """Read page geometry from the final section properties.

        Without section properties a settings part still implies a normal
        Word document, so Letter/1-inch defaults are assumed; with neither,
        the geometry is unknown.
        """
        sect = find(body, "w:sectPr")
        if sect is None and body is not None:
            paragraph_sections = body.findall("w:p/w:pPr/w:sectPr", NS)
            sect = paragraph_sections[-1] if paragraph_sections else None
        if sect is None:
            return PageSettings() if has_settings_part else None

        defaults_margins = Margins()
        defaults_size = PageSize()
        pg_sz = find(sect, "w:pgSz")
        pg_mar = find(sect, "w:pgMar")

        orient = w_attr(pg_sz, "orient")
        return PageSettings(
            margins=Margins(
                top=_or_default(to_int(w_attr(pg_mar, "top")), defaults_margins.top),
                bottom=_or_default(to_int(w_attr(pg_mar, "bottom")), defaults_margins.bottom),
                left=_or_default(
                    to_int(w_attr(pg_mar, "left") or w_attr(pg_mar, "start")),
                    defaults_margins.left,
                ),
                right=_or_default(
                    to_int(w_attr(pg_mar, "right") or w_attr(pg_mar, "end")),
                    defaults_margins.right,
                ),
            ),
            page_size=PageSize(
                width=_or_default(to_int(w_attr(pg_sz, "w")), defaults_size.width),
                height=_or_default(to_int(w_attr(pg_sz, "h")), defaults_size.height),
            ),
            orientation=(
                Orientation.LANDSCAPE if orient == "landscape" else Orientation.PORTRAIT
            ),
            from_section=True,
        )

    # ------------------------------------------------------------------
    # Headers, footers, footnotes
    # ------------------------------------------------------------------

    def _extract_headers(
        self, trees: dict[str, etree._Element], part_names: list[str]
    ) -> list[Header]:
        headers = []
        for name in part_names:
            root = trees.get(name)
            if root is None:
                continue
            paragraphs = tuple(
                self._parse_paragraph(index, p)
                for index, p in enumerate(root.xpath(_HEADER_PARAGRAPH_XPATH, namespaces=NS))
            )
            content = "\n".join(p.text for p in paragraphs).strip()
            headers.append(Header(part_name=name, content=content, paragraphs=paragraphs))
        return headers

    @staticmethod
    def _extract_footnotes(tree: Optional[etree._Element]) -> list[str]:
        if tree is None:
            return []
        # Separator and continuation notes carry a w:type; real notes do not
        return [
            element_text(note).strip()
            for note in tree.findall("w:footnote", NS)
            if w_attr(note, "type") is None
        ]


def _or_default(value: Optional[int], default: int) -> int:
    return default if value is None else value
