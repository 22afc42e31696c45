"""Shared utility functions."""

from .sequences import normalize, transcribe, translate
from .codons import GENETIC_CODE, AMINO_ACIDS, STOP_MARKER
from .encoding import encode_bases, codon_indices
from .params import parse_params, get_sequence_params, load_sequence_params
from .streams import read_sequence, write_output, abort

__all__ = [
    "normalize",
    "transcribe",
    "translate",
    "GENETIC_CODE",
    "AMINO_ACIDS",
    "STOP_MARKER",
    "encode_bases",
    "codon_indices",
    "parse_params",
    "get_sequence_params",
    "load_sequence_params",
    "read_sequence",
    "write_output",
    "abort",
]
