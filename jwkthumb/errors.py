from __future__ import annotations


class ThumbprintError(ValueError):
    """Base class for every error raised by jwkthumb."""


class InvalidInput(ThumbprintError):
    """Key material is missing, empty or of an unsupported shape."""


class InvalidArgument(ThumbprintError):
    """A call argument (e.g. the truncation length) is out of range."""


class InvalidCharacter(ThumbprintError):
    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"invalid_character: {character!r} at position {position} is not in the alphabet")


class UnsupportedEncoding(ThumbprintError):
    def __init__(self, encoding: object):
        self.encoding = encoding
        super().__init__(f"Thumbprint encoding {encoding!r} not supported")
