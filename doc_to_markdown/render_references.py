"""Renderers for cross-reference tags (see, seealso, paramref, ...)."""

import xml.etree.ElementTree as ET

from doc_to_markdown.renderer_pool import RendererPool
from doc_to_markdown.strip_generic_arity import strip_generic_arity


def reference_label(cref: str) -> str:
    """Short display name for a ``cref`` (``T:A.B.C`` -> ``C``)."""
    _, _, qualified = cref.rpartition(":")
    qualified = qualified.split("(", 1)[0]
    return strip_generic_arity(qualified.rsplit(".", 1)[-1]) or cref


def reference_link(cref: str, pool: RendererPool, text: str = "") -> str:
    """Render a ``cref`` as a link to the heading it resolves to.

    References with no rendered heading (framework types, unresolved ``!:``
    refs, ambiguous or malformed ids) are rendered as inline code.
    """
    resolved = pool.resolve_link(strip_generic_arity(cref))
    if resolved is None:
        return f"`{text or reference_label(cref)}`"
    target, href = resolved
    if " " in href:
        href = f"<{href}>"
    return f"[{text or target.title}]({href})"


def render_see(element: ET.Element, pool: RendererPool) -> str:
    """Render ``see`` as a link, an external link or a language keyword."""
    text = pool.render_content(element)
    cref = element.get("cref")
    if cref is not None:
        return reference_link(cref, pool, text)
    href = element.get("href")
    if href is not None:
        return f"[{text or href}]({href})"
    langword = element.get("langword")
    if langword is not None:
        return f"`{langword}`"
    return text


def render_seealso(element: ET.Element, pool: RendererPool) -> str:
    """Render ``seealso`` as its own line."""
    link = render_see(element, pool)
    if not link:
        return ""
    return f"See also: {link}{pool.newline}"


def render_name_ref(element: ET.Element, _pool: RendererPool) -> str:
    """Render ``paramref``/``typeparamref`` as an emphasized name."""
    name = element.get("name")
    return f"*{name}*" if name else ""
