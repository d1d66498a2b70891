"""Renderers for block-level documentation tags (summary, remarks, ...)."""

import textwrap
import xml.etree.ElementTree as ET

from doc_to_markdown.render_references import reference_label
from doc_to_markdown.renderer_pool import RendererPool


def render_paragraph(element: ET.Element, pool: RendererPool) -> str:
    """Render ``summary`` and ``para`` content as a paragraph."""
    body = pool.render_content(element)
    if not body:
        return ""
    nl = pool.newline
    return f"{body}{nl}{nl}"


def render_remarks(element: ET.Element, pool: RendererPool) -> str:
    """Render ``remarks`` as a bold-labelled paragraph."""
    body = pool.render_content(element)
    if not body:
        return ""
    nl = pool.newline
    return f"**Remarks:** {body}{nl}{nl}"


def render_example(element: ET.Element, pool: RendererPool) -> str:
    """Render ``example`` under a bold label."""
    body = pool.render_content(element)
    if not body:
        return ""
    nl = pool.newline
    return f"**Example:**{nl}{body}{nl}{nl}"


def render_returns(element: ET.Element, pool: RendererPool) -> str:
    """Render ``returns`` as an indented line."""
    return f"\tReturns: {pool.render_content(element)} {pool.newline}"


def render_value(element: ET.Element, pool: RendererPool) -> str:
    """Render a property's ``value`` as an indented line."""
    return f"\tValue: {pool.render_content(element)} {pool.newline}"


def render_exception(element: ET.Element, pool: RendererPool) -> str:
    """Render an ``exception`` line naming the thrown type."""
    cref = element.get("cref")
    if cref is None:
        return ""
    body = pool.render_content(element)
    return f"\tException {reference_label(cref)}: {body} {pool.newline}"


def render_code(element: ET.Element, pool: RendererPool) -> str:
    """Render a ``code`` block as a fenced block, keeping its layout."""
    code = textwrap.dedent("".join(element.itertext())).strip("\n")
    if not code.strip():
        return ""
    nl = pool.newline
    return f"{nl}```{nl}{code}{nl}```{nl}{nl}"


def render_inline_code(element: ET.Element, _pool: RendererPool) -> str:
    """Render ``c`` as inline code."""
    text = "".join(element.itertext()).strip()
    return f"`{text}`" if text else ""
