class LeetSpaceError(Exception):
    """Base class for errors raised by the review store."""


class ValidationError(LeetSpaceError):
    """Required input was missing or blank; nothing was written."""


class NotFoundError(LeetSpaceError):
    """The operation targeted an id that does not exist."""

    def __init__(self, kind: str, ident: int):
        super().__init__(f"{kind} {ident} not found")
        self.kind = kind
        self.ident = ident
