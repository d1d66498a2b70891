"""Exceptions raised while decoding documentation identifiers."""


class InvalidIdentifierError(ValueError):
    """Raised when a mangled member identifier cannot be decoded."""

    def __init__(self, identifier: str | None, reason: str) -> None:
        """Store the offending identifier alongside the reason."""
        super().__init__(f"Invalid member identifier {identifier!r}: {reason}")
        self.identifier = identifier
        self.reason = reason
