"""Member kind codes used as prefixes of mangled identifiers."""

TYPE_KIND = "T"

MEMBER_KINDS: dict[str, str] = {
    "T": "Type",
    "M": "Method",
    "P": "Property",
    "F": "Field",
    "E": "Event",
}


def is_type_kind(kind: str) -> bool:
    """Check if the kind code denotes a type."""
    return kind == TYPE_KIND


def is_known_kind(kind: str) -> bool:
    """Check if the kind code is one the renderer has a template for."""
    return kind in MEMBER_KINDS
