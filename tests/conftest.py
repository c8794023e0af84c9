"""Shared fixtures: in-memory .docx packages and ready-made document models."""

from __future__ import annotations

import io
import zipfile
from types import SimpleNamespace
from typing import Optional, Union
from xml.sax.saxutils import escape

import pytest

from mla_checker.config.loader import clear_cache, get_config
from mla_checker.domain.models import (
    Alignment,
    DocumentModel,
    Header,
    Indentation,
    LineRule,
    PageSettings,
    Paragraph,
    Run,
    Spacing,
    Style,
    StyleType,
)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
REL_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

LETTER_SECT_PR = (
    '<w:sectPr><w:pgSz w:w="12240" w:h="15840"/>'
    '<w:pgMar w:top="1440" w:right="1440" w:bottom="1440" w:left="1440"/></w:sectPr>'
)


# ---------------------------------------------------------------------------
# Raw WordprocessingML builders
# ---------------------------------------------------------------------------


def run_xml(
    text: str,
    *,
    font: Optional[str] = "Times New Roman",
    size: Optional[Union[int, str]] = 24,
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
) -> str:
    props = []
    if font:
        props.append(f'<w:rFonts w:ascii="{font}" w:hAnsi="{font}"/>')
    if bold:
        props.append("<w:b/>")
    if italic:
        props.append("<w:i/>")
    if underline:
        props.append('<w:u w:val="single"/>')
    if size is not None:
        props.append(f'<w:sz w:val="{size}"/>')
    rpr = f"<w:rPr>{''.join(props)}</w:rPr>" if props else ""
    return f'<w:r>{rpr}<w:t xml:space="preserve">{escape(text)}</w:t></w:r>'


def paragraph_xml(
    text: str = "",
    *,
    align: Optional[str] = None,
    first_line: Optional[int] = None,
    hanging: Optional[int] = None,
    left: Optional[int] = None,
    line: Optional[int] = 480,
    line_rule: Optional[str] = "auto",
    runs: Optional[list[str]] = None,
    extra_ppr: str = "",
    **run_kwargs,
) -> str:
    ppr = []
    if line is not None:
        rule = f' w:lineRule="{line_rule}"' if line_rule else ""
        ppr.append(f'<w:spacing w:line="{line}"{rule}/>')
    ind = []
    if left is not None:
        ind.append(f'w:left="{left}"')
    if first_line is not None:
        ind.append(f'w:firstLine="{first_line}"')
    if hanging is not None:
        ind.append(f'w:hanging="{hanging}"')
    if ind:
        ppr.append(f"<w:ind {' '.join(ind)}/>")
    if align:
        ppr.append(f'<w:jc w:val="{align}"/>')
    ppr.append(extra_ppr)
    content = "".join(runs) if runs is not None else (run_xml(text, **run_kwargs) if text else "")
    return f"<w:p><w:pPr>{''.join(ppr)}</w:pPr>{content}</w:p>"


def document_xml(paragraphs: list[str], sect_pr: Optional[str] = LETTER_SECT_PR) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}" xmlns:r="{R_NS}"><w:body>'
        f"{''.join(paragraphs)}{sect_pr or ''}</w:body></w:document>"
    )


def header_xml(text: str, align: Optional[str] = "right", tag: str = "hdr") -> str:
    return (
        f'<w:{tag} xmlns:w="{W_NS}">'
        f"{paragraph_xml(text, align=align, line=None)}</w:{tag}>"
    )


def styles_xml(font: Optional[str] = "Times New Roman", size: Optional[int] = 24) -> str:
    rpr = ""
    if font or size:
        fonts = f'<w:rFonts w:ascii="{font}" w:hAnsi="{font}"/>' if font else ""
        sz = f'<w:sz w:val="{size}"/>' if size else ""
        rpr = f"<w:rPr>{fonts}{sz}</w:rPr>"
    return (
        f'<w:styles xmlns:w="{W_NS}">'
        '<w:style w:type="paragraph" w:default="1" w:styleId="Normal">'
        f'<w:name w:val="Normal"/>{rpr}</w:style>'
        '<w:style w:type="character" w:styleId="Emphasis"><w:name w:val="Emphasis"/>'
        "<w:rPr><w:i/></w:rPr></w:style>"
        "</w:styles>"
    )


SETTINGS_XML = f'<w:settings xmlns:w="{W_NS}"><w:defaultTabStop w:val="720"/></w:settings>'


def relationships_xml(targets: list[tuple[str, str]]) -> str:
    rels = "".join(
        f'<Relationship Id="rId{i}" Type="{REL_TYPE}/{kind}" Target="{target}"/>'
        for i, (kind, target) in enumerate(targets, start=1)
    )
    return f'<Relationships xmlns="{REL_NS}">{rels}</Relationships>'


def package(parts: dict[str, Union[str, bytes]]) -> bytes:
    """Zip *parts* into a package."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, content in parts.items():
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def wml():
    """The raw WordprocessingML builders."""
    return SimpleNamespace(
        run=run_xml,
        paragraph=paragraph_xml,
        document=document_xml,
        header=header_xml,
        styles=styles_xml,
        settings=SETTINGS_XML,
        relationships=relationships_xml,
        package=package,
        letter_sect_pr=LETTER_SECT_PR,
        ns=W_NS,
    )


@pytest.fixture
def make_docx():
    """Factory building .docx bytes from paragraph XML snippets."""

    def _make(
        paragraphs: list[str] = (),
        *,
        sect_pr: Optional[str] = LETTER_SECT_PR,
        styles: Optional[str] = None,
        settings: bool = True,
        headers: list[str] = (),
        footers: list[str] = (),
        extra_parts: Optional[dict[str, Union[str, bytes]]] = None,
    ) -> bytes:
        parts: dict[str, Union[str, bytes]] = {
            "word/document.xml": document_xml(list(paragraphs), sect_pr),
        }
        if styles is not None:
            parts["word/styles.xml"] = styles
        if settings:
            parts["word/settings.xml"] = SETTINGS_XML

        targets = []
        for i, xml in enumerate(headers, start=1):
            parts[f"word/header{i}.xml"] = xml
            targets.append(("header", f"header{i}.xml"))
        for i, xml in enumerate(footers, start=1):
            parts[f"word/footer{i}.xml"] = xml
            targets.append(("footer", f"footer{i}.xml"))
        if targets:
            parts["word/_rels/document.xml.rels"] = relationships_xml(targets)

        parts.update(extra_parts or {})
        return package(parts)

    return _make


# ---------------------------------------------------------------------------
# Document models
# ---------------------------------------------------------------------------


def make_paragraph(
    index: int,
    text: str = "",
    *,
    alignment: Alignment = Alignment.LEFT,
    first_line: Optional[int] = None,
    hanging: Optional[int] = None,
    line: Optional[int] = 480,
    line_rule: Optional[LineRule] = LineRule.AUTO,
    font: Optional[str] = "Times New Roman",
    size: Optional[float] = 12.0,
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
    runs: Optional[tuple[Run, ...]] = None,
) -> Paragraph:
    indentation = None
    if first_line is not None or hanging is not None:
        indentation = Indentation(first_line=first_line, hanging=hanging)
    spacing = Spacing(line=line, line_rule=line_rule) if line is not None else None
    if runs is None:
        runs = (
            (
                Run(
                    text=text,
                    font_family=font,
                    font_size=size,
                    bold=bold,
                    italic=italic,
                    underline=underline,
                ),
            )
            if text
            else ()
        )
    return Paragraph(
        index=index,
        text=text,
        alignment=alignment,
        indentation=indentation,
        spacing=spacing,
        runs=runs,
    )


@pytest.fixture
def build_document():
    """Factory turning paragraph items into a DocumentModel.

    Each item is either plain text or a ``(text, kwargs)`` pair passed to
    ``make_paragraph``; indices are assigned in order.
    """

    def _build(
        items,
        *,
        page_settings: Optional[PageSettings] = PageSettings(from_section=True),
        headers: tuple[Header, ...] = (),
        styles: tuple[Style, ...] = (),
    ) -> DocumentModel:
        paragraphs = []
        for index, item in enumerate(items):
            text, kwargs = (item, {}) if isinstance(item, str) else item
            paragraphs.append(make_paragraph(index, text, **kwargs))
        return DocumentModel(
            paragraphs=tuple(paragraphs),
            styles=styles,
            page_settings=page_settings,
            headers=headers,
        )

    return _build


BODY = {"first_line": 720}
CENTERED = {"alignment": Alignment.CENTER}
ENTRY = {"hanging": 720}

COMPLIANT_PARAGRAPHS = [
    "Jane Smith",
    "Professor Jones",
    "English 101",
    "15 October 2024",
    ("Memory and Place in American Fiction", CENTERED),
    ("Places hold memories long after their witnesses are gone (Morrison 43).", BODY),
    ("Faulkner's county is read as one extended memory (Brooks 12).", BODY),
    ("Baldwin's Harlem is at once a home and a trap (Baldwin 87).", BODY),
    ("Memory in these works belongs to whole communities.", BODY),
    ("Read together, these works treat place as a form of evidence.", BODY),
    ("Works Cited", CENTERED),
    ("Baldwin, James. Notes of a Native Son. Beacon Press, 1955.", ENTRY),
    ("Brooks, Cleanth. The Yoknapatawpha Country. Yale University Press, 1963.", ENTRY),
    ("Morrison, Toni. Beloved. Alfred A. Knopf, 1987.", ENTRY),
]


def smith_header(alignment: Alignment = Alignment.RIGHT, text: str = "Smith 1") -> Header:
    return Header(
        part_name="word/header1.xml",
        content=text,
        paragraphs=(make_paragraph(0, text, alignment=alignment),),
    )


@pytest.fixture
def make_header():
    """Factory for a one-paragraph running header."""
    return smith_header


@pytest.fixture
def compliant_document(build_document) -> DocumentModel:
    """A paper that satisfies every rule."""
    return build_document(
        COMPLIANT_PARAGRAPHS,
        headers=(smith_header(),),
        styles=(
            Style(
                style_id="Normal",
                name="Normal",
                kind=StyleType.PARAGRAPH,
                font_family="Times New Roman",
                font_size=12.0,
            ),
        ),
    )


@pytest.fixture
def rules():
    """Catalog lookup by rule id."""
    return get_config().rule


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()
