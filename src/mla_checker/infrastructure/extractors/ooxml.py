"""WordprocessingML helpers shared by the extractor.

Namespaces, attribute access and value coercion for lxml trees of
package parts. Nothing here knows about the document model.
"""

from __future__ import annotations

import math
from typing import Optional

from lxml import etree

NS = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "rel": "http://schemas.openxmlformats.org/package/2006/relationships",
}

_OFF_VALUES = frozenset({"0", "false", "off", "none"})


def qn(tag: str) -> str:
    """Expand a ``prefix:local`` name into Clark notation."""
    prefix, local = tag.split(":", 1)
    return f"{{{NS[prefix]}}}{local}"


def parse_xml(data: bytes) -> etree._Element:
    """Parse one part.

    A fresh parser per call: parser instances are not shared across threads.
    Entity resolution and network access are disabled for untrusted input.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    return etree.fromstring(data, parser=parser)


def find(el: Optional[etree._Element], path: str) -> Optional[etree._Element]:
    """``el.find`` that tolerates a missing parent."""
    if el is None:
        return None
    return el.find(path, NS)


def w_attr(el: Optional[etree._Element], name: str) -> Optional[str]:
    """Value of the ``w:``-namespaced attribute *name*, if any."""
    if el is None:
        return None
    return el.get(qn(f"w:{name}"))


def to_int(value: Optional[str]) -> Optional[int]:
    """Coerce a measurement attribute to int, ``None`` when unusable."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number)


def is_on(el: Optional[etree._Element]) -> bool:
    """Evaluate a toggle property such as ``<w:b/>`` or ``<w:b w:val="0"/>``."""
    if el is None:
        return False
    value = w_attr(el, "val")
    return value is None or value.lower() not in _OFF_VALUES


def element_text(el: etree._Element) -> str:
    """Concatenated text of all ``w:t`` descendants."""
    return "".join(t.text or "" for t in el.iter(qn("w:t")))
