"""Correction of a whole documentation tree and regrouping by namespace."""

import logging
import xml.etree.ElementTree as ET

from doc_to_markdown.build_namespace_document import build_namespace_document
from doc_to_markdown.correct_member import correct_member
from doc_to_markdown.errors import InvalidIdentifierError

logger = logging.getLogger(__name__)


def correct_document(
    tree: ET.Element | ET.ElementTree,
    *,
    strict: bool = False,
) -> dict[str, ET.Element]:
    """Correct every member and build one document per namespace.

    Namespaces (including ``""`` for the global namespace) and the members
    inside them keep the order in which they were first encountered.
    Members with undecodable identifiers are skipped with a warning, unless
    ``strict`` is set, in which case ``InvalidIdentifierError`` propagates.
    """
    root = tree.getroot() if isinstance(tree, ET.ElementTree) else tree
    if root is None:
        msg = "Documentation tree has no root element"
        raise ValueError(msg)

    logger.debug("Started member correction.")
    namespaces: dict[str, list[ET.Element]] = {}
    for member in root.iter("member"):
        try:
            namespace, corrected = correct_member(member)
        except InvalidIdentifierError as e:
            if strict:
                raise
            logger.warning("Skipping member: %s", e)
            continue
        namespaces.setdefault(namespace, []).append(corrected)
    logger.debug("Finished member correction.")

    assembly = root.find("assembly")
    if assembly is None:
        logger.info("assembly element not found")

    logger.debug("Started namespace ordering.")
    documents = {
        namespace: build_namespace_document(assembly, members)
        for namespace, members in namespaces.items()
    }
    logger.debug("Finished namespace ordering: %d namespaces.", len(documents))
    return documents
