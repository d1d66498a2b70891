"""Rendering of every corrected namespace document to Markdown."""

import logging
import xml.etree.ElementTree as ET

from doc_to_markdown.renderer_pool import RendererPool

logger = logging.getLogger(__name__)


def render_namespace_documents(
    documents: dict[str, ET.Element],
    pool: RendererPool,
) -> dict[str, str]:
    """Render one Markdown string per namespace, keeping namespace order."""
    rendered: dict[str, str] = {}
    for namespace, document in documents.items():
        logger.debug("Rendering namespace %r", namespace)
        rendered[namespace] = pool.with_namespace(namespace).render(document)
    return rendered
