"""Renderers for ``param`` and ``typeparam`` elements."""

import xml.etree.ElementTree as ET

from doc_to_markdown.renderer_pool import RendererPool


def render_param(element: ET.Element, pool: RendererPool) -> str:
    """Render a parameter as a single indented line."""
    if element.tag != "param":
        return ""
    name = element.get("name")
    if name is None:
        return ""
    body = pool.render_content(element)
    return f"\tParameter {name}: {body} {pool.newline}"


def render_typeparam(element: ET.Element, pool: RendererPool) -> str:
    """Render a generic type parameter as a single indented line."""
    name = element.get("name")
    if name is None:
        return ""
    body = pool.render_content(element)
    return f"\tType parameter {name}: {body} {pool.newline}"
