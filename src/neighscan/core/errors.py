class NeighscanError(Exception):
    """Base error for neighscan exceptions."""


class ConfigError(NeighscanError):
    """Raised when the settings yaml is invalid."""


class StreamError(NeighscanError):
    """Raised when the input source fails while reading."""


class ParseError(NeighscanError):
    """A recognized line could not be parsed."""

    def __init__(self, kind: str, line_number: int, line: str) -> None:
        self.kind = kind
        self.line_number = line_number
        self.line = line
        super().__init__(f"{kind}: line={line_number} [{line}]")


class ShortLineError(ParseError):
    """Raised when a recognized line has fewer fields than its format requires."""


class MissingContextError(ParseError):
    """Raised when a detail line shows up before any neighbor header."""
