"""Correction of a single ``member`` element's cryptic identifier."""

import copy
import xml.etree.ElementTree as ET

from doc_to_markdown.generic_display_name import generic_display_name
from doc_to_markdown.mangled_name import parse_mangled_name
from doc_to_markdown.member_kind import is_type_kind
from doc_to_markdown.strip_generic_arity import strip_generic_arity


def correct_member(member: ET.Element) -> tuple[str, ET.Element]:
    """Return the grouping namespace and a corrected copy of the member.

    The copy carries ``membertype``, ``namespace`` and a display ``name``;
    types also get a ``typeref`` cross-reference. ``see/@cref`` values lose
    their generic-arity suffix. The input element is left untouched.

    Raises:
        InvalidIdentifierError: if the ``name`` attribute cannot be decoded.

    """
    parsed = parse_mangled_name(member.get("name"))
    corrected = copy.deepcopy(member)

    type_params = [
        tp.attrib["name"]
        for tp in corrected.findall("typeparam")
        if "name" in tp.attrib
    ]

    corrected.set("membertype", parsed.kind)
    corrected.set("namespace", parsed.namespace)
    corrected.set("name", generic_display_name(parsed.name, type_params))
    if is_type_kind(parsed.kind):
        base_name = strip_generic_arity(parsed.name)
        corrected.set("typeref", f"{parsed.kind}:{parsed.namespace}.{base_name}")

    _correct_see_refs(corrected)
    return parsed.namespace, corrected


def _correct_see_refs(member: ET.Element) -> None:
    """Strip generic-arity suffixes from every nested ``see/@cref``."""
    for see in member.iter("see"):
        cref = see.get("cref")
        if cref is None:
            continue
        see.set("cref", strip_generic_arity(cref))
