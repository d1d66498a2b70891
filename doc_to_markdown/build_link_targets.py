"""Logic for resolving ``cref`` values to rendered member headings."""

import logging
import xml.etree.ElementTree as ET

from doc_to_markdown.correct_member import correct_member
from doc_to_markdown.errors import InvalidIdentifierError
from doc_to_markdown.link_target import LinkTarget
from doc_to_markdown.member_anchor import member_anchor
from doc_to_markdown.member_kind import is_known_kind
from doc_to_markdown.strip_generic_arity import strip_generic_arity

logger = logging.getLogger(__name__)


def build_link_targets(
    tree: ET.Element | ET.ElementTree,
) -> dict[str, LinkTarget | None]:
    """Map corrected ``cref`` values to the headings the renderer will emit.

    Keys are identifiers with the generic-arity suffix stripped, the same
    form the corrector leaves on ``see/@cref``. A key shared by members with
    different headings maps to None so it is never linked to the wrong one.
    """
    root = tree.getroot() if isinstance(tree, ET.ElementTree) else tree
    targets: dict[str, LinkTarget | None] = {}
    if root is None:
        return targets

    for member in root.iter("member"):
        identifier = member.get("name")
        try:
            namespace, corrected = correct_member(member)
        except InvalidIdentifierError:
            continue
        kind = corrected.get("membertype", "")
        if not is_known_kind(kind):
            continue

        name = corrected.get("name", "")
        target = LinkTarget(
            title=name.split("|", 1)[0],
            namespace=namespace,
            anchor=member_anchor(namespace, name),
        )
        key = strip_generic_arity(str(identifier))
        if key in targets and targets[key] != target:
            logger.debug("Ambiguous cref %r, rendering as code", key)
            targets[key] = None
        else:
            targets.setdefault(key, target)
    return targets
