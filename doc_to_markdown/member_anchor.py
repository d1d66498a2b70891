"""Anchor ids shared by member headings and cross-reference links."""


def member_anchor(namespace: str, name: str) -> str:
    """Build the lowercase anchor id ``namespace.name``."""
    return f"{namespace}.{name}".lower()


def anchor_title(namespace: str, name: str) -> str:
    """Build a heading title: an HTML anchor followed by the display name."""
    return f'<a name="{member_anchor(namespace, name)}"></a>{name}'
