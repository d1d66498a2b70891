"""Logic for synthesizing the per-namespace output document."""

import copy
import xml.etree.ElementTree as ET
from collections.abc import Iterable


def build_namespace_document(
    assembly: ET.Element | None,
    members: Iterable[ET.Element],
) -> ET.Element:
    """Build ``<doc>[assembly]<members>...</members></doc>``.

    The assembly is deep-copied so each document owns its own subtree.
    """
    doc = ET.Element("doc")
    if assembly is not None:
        doc.append(copy.deepcopy(assembly))
    members_element = ET.SubElement(doc, "members")
    members_element.extend(members)
    return doc
