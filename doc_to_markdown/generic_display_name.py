"""Logic for rendering generic type parameters into display names."""

from collections.abc import Sequence

from doc_to_markdown.strip_generic_arity import GENERIC_ARITY_MARKER

UNKNOWN_TYPE_PARAM = "?"


def generic_display_name(name: str, type_params: Sequence[str]) -> str:
    """Expand a generic-arity suffix into the pipe-delimited marker format.

    - ``Dict`2`` with type params ``TKey``/``TValue`` -> ``Dict|TKey, TValue|``.
    - Without declared type params a single ``?`` is used, whatever the arity.
    - Names without a backtick are returned unchanged.
    """
    parts = name.split(GENERIC_ARITY_MARKER)
    if len(parts) == 1:
        return name
    joined = ", ".join(type_params) if type_params else UNKNOWN_TYPE_PARAM
    return f"{parts[0]}|{joined}|"
