"""
XML rendering for the HTTP boundary.

Values are rendered as `<root><field>text</field>...</root>` from an attrs
instance, in declaration order.
"""

from typing import Any
from xml.etree import ElementTree

import attrs
from fastapi.responses import Response


class XMLResponse(Response):
    media_type = 'application/xml'


def render_xml(root_tag: str, value: Any) -> bytes:
    root = ElementTree.Element(root_tag)
    for field_name, field_value in attrs.asdict(value).items():
        child = ElementTree.SubElement(root, field_name)
        child.text = '' if field_value is None else str(field_value)
    return ElementTree.tostring(root, encoding='utf-8', xml_declaration=True)
