"""Decoding of compiler-generated member identifiers (``M:Ns.Type.Method(...)``)."""

import re
from dataclasses import dataclass

from doc_to_markdown.errors import InvalidIdentifierError
from doc_to_markdown.member_kind import is_type_kind

# First parenthesised span without nested parentheses.
PARAMETER_LIST_RE = re.compile(r"\([^(]*\)")


@dataclass(frozen=True)
class MangledName:
    """Structured view of a mangled identifier."""

    kind: str
    namespace: str
    name: str  # last path segment, generic-arity suffix still attached


def parse_mangled_name(identifier: str | None) -> MangledName:
    """Split an identifier into kind, grouping namespace and raw display name.

    For non-type members the declaring type segment is dropped: the namespace
    is what remains after removing both the member name and its type.
    """
    if not identifier or ":" not in identifier:
        raise InvalidIdentifierError(identifier, "missing kind prefix")

    kind, qualified = identifier.split(":", 1)
    if not kind:
        raise InvalidIdentifierError(identifier, "empty kind")

    qualified = PARAMETER_LIST_RE.sub("", qualified, count=1)
    if not qualified:
        raise InvalidIdentifierError(identifier, "empty qualified path")

    segments = qualified.split(".")
    name = segments.pop()
    if not name:
        raise InvalidIdentifierError(identifier, "empty member name")
    if not is_type_kind(kind) and segments:
        segments.pop()

    return MangledName(kind=kind, namespace=".".join(segments), name=name)
