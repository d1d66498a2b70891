"""Logic for removing generic-arity markers from names."""

GENERIC_ARITY_MARKER = "`"


def strip_generic_arity(value: str) -> str:
    """Drop the backtick and everything after it (List`1 -> List)."""
    return value.split(GENERIC_ARITY_MARKER, 1)[0]
