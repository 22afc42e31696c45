"""Errors raised by the transcription and translation stages."""


class SequenceError(ValueError):
    """Base class for sequences that cannot be transcribed or translated."""


class MalformedSequence(SequenceError):
    """Structural defect: length not codon-aligned, or non-ASCII RNA."""

    def __init__(self, message: str, length: int | None = None):
        super().__init__(message)
        self.length = length


class InvalidSymbol(SequenceError):
    """A character outside the alphabet of the sequence kind."""

    def __init__(self, symbol: str, position: int, alphabet: str):
        super().__init__(
            f"Invalid symbol {symbol!r} at position {position + 1} "
            f"(expected one of {', '.join(alphabet)})"
        )
        self.symbol = symbol
        self.position = position
        self.alphabet = alphabet
