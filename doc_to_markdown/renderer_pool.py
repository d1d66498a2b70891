"""Tag-keyed dispatch pool for Markdown node renderers."""

from __future__ import annotations

import copy
import logging
import os
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import TYPE_CHECKING

from doc_to_markdown.output_file_for_namespace import namespace_file_name

if TYPE_CHECKING:
    from doc_to_markdown.link_target import LinkTarget

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")

NodeRenderer = Callable[[ET.Element, "RendererPool"], str]


def collapse_whitespace(text: str | None) -> str:
    """Collapse runs of whitespace (XML indentation) into single spaces."""
    if not text:
        return ""
    return WHITESPACE_RE.sub(" ", text)


class RendererPool:
    """Dispatches elements to the renderer registered for their tag.

    Renderers receive the pool so they can render nested content through it.
    """

    def __init__(
        self,
        newline: str = os.linesep,
        link_targets: dict[str, LinkTarget | None] | None = None,
        namespace_page: Callable[[str], str] = namespace_file_name,
    ) -> None:
        """Create an empty pool emitting ``newline`` as line separator.

        ``link_targets`` resolves ``cref`` values to headings and
        ``namespace_page`` names the page holding a namespace's headings.
        """
        self.newline = newline
        self.link_targets = link_targets or {}
        self.namespace_page = namespace_page
        self.namespace: str | None = None
        self._renderers: dict[str, NodeRenderer] = {}

    def with_namespace(self, namespace: str) -> RendererPool:
        """Return a pool sharing these renderers, bound to one namespace page."""
        bound = copy.copy(self)
        bound.namespace = namespace
        return bound

    def resolve_link(self, cref: str) -> tuple[LinkTarget, str] | None:
        """Resolve a ``cref`` to its target and href, or None if unresolved.

        Targets on the current page get a bare ``#anchor``; others are
        prefixed with their namespace page.
        """
        target = self.link_targets.get(cref)
        if target is None:
            return None
        href = f"#{target.anchor}"
        if target.namespace != self.namespace:
            href = self.namespace_page(target.namespace) + href
        return target, href

    def register(self, tag: str, renderer: NodeRenderer) -> None:
        """Register (or replace) the renderer for a tag."""
        self._renderers[tag] = renderer

    def lookup(self, tag: str) -> NodeRenderer | None:
        """Return the renderer registered for a tag, if any."""
        return self._renderers.get(tag)

    def dispatch(self, element: ET.Element) -> str | None:
        """Render an element, or return None when no renderer handles its tag.

        An empty string means a renderer ran and deliberately produced nothing.
        """
        renderer = self.lookup(element.tag)
        if renderer is None:
            logger.debug("No renderer registered for <%s>", element.tag)
            return None
        return renderer(element, self)

    def render(self, element: ET.Element) -> str:
        """Render an element; unknown tags yield an empty string."""
        return self.dispatch(element) or ""

    def render_children(self, element: ET.Element) -> str:
        """Concatenate the rendering of every child element in document order."""
        return "".join(self.render(child) for child in element)

    def render_content(self, element: ET.Element) -> str:
        """Render mixed content: own text interleaved with rendered children."""
        parts = [collapse_whitespace(element.text)]
        for child in element:
            parts.append(self.render(child))
            parts.append(collapse_whitespace(child.tail))
        return "".join(parts).strip()
