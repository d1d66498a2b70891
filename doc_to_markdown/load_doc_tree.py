"""Loading of XML documentation files."""

import xml.etree.ElementTree as ET
from pathlib import Path


def load_doc_tree(path: Path) -> ET.Element:
    """Parse an XML documentation file and return its root element.

    Raises:
        xml.etree.ElementTree.ParseError: if the file is not well-formed XML.

    """
    return ET.parse(path).getroot()
