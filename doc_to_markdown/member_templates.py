"""Markdown templates for each member kind."""

from collections.abc import Callable

MemberTemplate = Callable[[str, str, str], str]


def type_template(title: str, body: str, nl: str) -> str:
    """Render a type section."""
    return f"---{nl}#### Type: {title}{nl}{nl}{body}{nl}{nl}"


def method_template(title: str, body: str, nl: str) -> str:
    """Render a method section."""
    return f"#### Method: {title}{nl}{nl}{nl}{body}{nl}"


def property_template(title: str, body: str, nl: str) -> str:
    """Render a property section."""
    return f"#### Property: {title}{nl}{nl}{nl}{body}{nl}"


def field_template(title: str, body: str, nl: str) -> str:
    """Render a field section."""
    return f"#### Field: {title}{nl}{nl}{nl}{body}{nl}"


def event_template(title: str, body: str, nl: str) -> str:
    """Render an event section."""
    return f"#### Event: {title}{nl}{nl}{nl}{body}{nl}"


MEMBER_TEMPLATES: dict[str, MemberTemplate] = {
    "T": type_template,
    "M": method_template,
    "P": property_template,
    "F": field_template,
    "E": event_template,
}
