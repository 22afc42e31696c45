"""dna2protein - transcribe DNA to mRNA and translate it to amino acids."""

__version__ = "0.1.0"

from .exceptions import SequenceError, MalformedSequence, InvalidSymbol
from .utils.sequences import transcribe, translate

__all__ = [
    "__version__",
    "SequenceError",
    "MalformedSequence",
    "InvalidSymbol",
    "transcribe",
    "translate",
]
