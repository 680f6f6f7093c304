class ExtractError(Exception):
    """Raised when fenced code blocks cannot be extracted from a document."""


class MetaParseError(ExtractError, ValueError):
    """The metadata part of an info string is malformed JSON or cannot be tokenized."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text
