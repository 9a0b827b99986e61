"""ElementTree helpers and the fixed-layout XML renderer.

The government schema expects two-space indentation, ``<TAG/>`` for
empty elements, and all five XML special characters escaped in text,
which ``ElementTree.tostring`` does not produce. Fragments are therefore
built as ElementTree elements and rendered here.
"""

import xml.etree.ElementTree as ET
from typing import Any, Optional

from fundreport.serializers.formatting import escape_xml, format_amount

XML_DECLARATION = '<?xml version="1.0" encoding="Shift_JIS"?>'
INDENT = "  "


def add_text(parent: ET.Element, tag: str, value: Optional[str] = None) -> ET.Element:
    """Append a text child; empty or missing text yields an empty element."""
    child = ET.SubElement(parent, tag)
    if value:
        child.text = value
    return child


def add_amount(parent: ET.Element, tag: str, value: Any) -> ET.Element:
    """Append an amount child; None yields an empty element, 0 yields "0"."""
    child = ET.SubElement(parent, tag)
    if value is not None:
        child.text = format_amount(value)
    return child


def _render(element: ET.Element, level: int, lines: list[str]) -> None:
    pad = INDENT * level
    children = list(element)
    if children:
        lines.append(f"{pad}<{element.tag}>")
        for child in children:
            _render(child, level + 1, lines)
        lines.append(f"{pad}</{element.tag}>")
    elif element.text:
        lines.append(f"{pad}<{element.tag}>{escape_xml(element.text)}</{element.tag}>")
    else:
        lines.append(f"{pad}<{element.tag}/>")


def render_fragment(element: ET.Element, level: int = 0) -> str:
    """Render an element tree as indented XML without a declaration."""
    lines: list[str] = []
    _render(element, level, lines)
    return "\n".join(lines)


def render_document(root: ET.Element) -> str:
    """Render a complete document, declaration first."""
    return f"{XML_DECLARATION}\n{render_fragment(root)}"
