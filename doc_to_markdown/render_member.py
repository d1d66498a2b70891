"""Renderer for corrected ``member`` elements."""

import xml.etree.ElementTree as ET

from doc_to_markdown.member_anchor import anchor_title
from doc_to_markdown.member_templates import MEMBER_TEMPLATES
from doc_to_markdown.renderer_pool import RendererPool


def render_member(element: ET.Element, pool: RendererPool) -> str:
    """Render a member with the template for its kind.

    Members lacking ``name``, ``membertype`` or ``namespace``, or of a kind
    with no template, render to an empty string.
    """
    if element.tag != "member":
        return ""

    name = element.get("name")
    member_type = element.get("membertype")
    namespace = element.get("namespace")
    if name is None or member_type is None or namespace is None:
        return ""

    template = MEMBER_TEMPLATES.get(member_type)
    if template is None:
        return ""

    title = anchor_title(namespace, name)
    body = pool.render_children(element)
    return template(title, body, pool.newline)
