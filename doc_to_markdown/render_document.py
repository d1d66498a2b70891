"""Renderers for the synthesized document structure."""

import xml.etree.ElementTree as ET

from doc_to_markdown.renderer_pool import RendererPool


def render_container(element: ET.Element, pool: RendererPool) -> str:
    """Render ``doc`` and ``members`` as the concatenation of their children."""
    return pool.render_children(element)


def render_assembly(element: ET.Element, pool: RendererPool) -> str:
    """Render the assembly name as the document heading."""
    name = (element.findtext("name") or "").strip()
    if not name:
        return ""
    nl = pool.newline
    return f"# {name}{nl}{nl}"
