"""Structural heuristics shared by several rule checks.

Title detection, Works Cited location and the MLA heading-block signals.
These are approximations by nature; thresholds come from the domain
constants and must not drift, since reports have to be reproducible.
"""

from __future__ import annotations

from typing import Optional

from mla_checker.domain.models.document import Paragraph
from mla_checker.domain.models.enums import Alignment
from mla_checker.domain.rules.constants import (
    CENTERED_TITLE_WINDOW,
    FALLBACK_TITLE_WINDOW,
    LEADING_ARTICLES,
    POTENTIAL_TITLE_MAX_CHARS,
    POTENTIAL_TITLE_MAX_RANK,
    WORKS_CITED_MARKERS,
)

LEFT_ALIGNMENTS = (Alignment.LEFT, Alignment.START)
RIGHT_ALIGNMENTS = (Alignment.RIGHT, Alignment.END)


def potential_title_indices(paragraphs: tuple[Paragraph, ...]) -> set[int]:
    """Indices of paragraphs that may be a title.

    A paragraph qualifies when it is among the first three non-empty
    paragraphs (counting itself) and is centered or under 100 characters.
    """
    indices: set[int] = set()
    non_empty_seen = 0
    for paragraph in paragraphs:
        if not paragraph.is_empty:
            non_empty_seen += 1
        if non_empty_seen > POTENTIAL_TITLE_MAX_RANK:
            break
        if paragraph.is_centered or len(paragraph.text) < POTENTIAL_TITLE_MAX_CHARS:
            indices.add(paragraph.index)
    return indices


def find_title(paragraphs: tuple[Paragraph, ...]) -> Optional[Paragraph]:
    """First centered paragraph among the first five, else the first
    non-empty paragraph among the first three."""
    for paragraph in paragraphs[:CENTERED_TITLE_WINDOW]:
        if not paragraph.is_empty and paragraph.is_centered:
            return paragraph
    for paragraph in paragraphs[:FALLBACK_TITLE_WINDOW]:
        if not paragraph.is_empty:
            return paragraph
    return None


def is_works_cited_heading(paragraph: Paragraph) -> bool:
    lowered = paragraph.text.lower()
    return any(marker in lowered for marker in WORKS_CITED_MARKERS)


def find_works_cited(paragraphs: tuple[Paragraph, ...]) -> Optional[Paragraph]:
    """The first paragraph mentioning "works cited" or "bibliography"."""
    for paragraph in paragraphs:
        if is_works_cited_heading(paragraph):
            return paragraph
    return None


def works_cited_entries(paragraphs: tuple[Paragraph, ...], heading: Paragraph) -> list[Paragraph]:
    """Non-empty paragraphs following the Works Cited heading."""
    return [p for p in paragraphs[heading.index + 1 :] if not p.is_empty]


def works_cited_indices(paragraphs: tuple[Paragraph, ...]) -> set[int]:
    """Indices of the Works Cited heading and everything after it."""
    heading = find_works_cited(paragraphs)
    if heading is None:
        return set()
    return {p.index for p in paragraphs[heading.index :]}


def sort_key(entry: str) -> str:
    """Alphabetization key for a Works Cited entry.

    Leading punctuation (quotes around a title) is dropped and a leading
    article is ignored, as MLA alphabetizes by the first significant word.
    """
    key = entry.strip().lstrip("\"'“‘([").casefold()
    for article in LEADING_ARTICLES:
        if key.startswith(article):
            return key[len(article) :].lstrip()
    return key
