"""Data model for resolved cross-reference targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Heading a ``cref`` resolves to."""

    title: str
    namespace: str  # selects the output page
    anchor: str  # matches the member heading's <a name>
