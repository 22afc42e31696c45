"""DNA -> mRNA transcription and mRNA -> amino-acid translation."""

import logging
import re

from dna2protein.exceptions import InvalidSymbol
from dna2protein.utils.codons import AMINO_ACIDS
from dna2protein.utils.encoding import check_codon_aligned, codon_indices

logger = logging.getLogger(__name__)

DNA_ALPHABET = "ACGT"

# Base-pairing table: the complement strand read in the same direction
RNA_TABLE = str.maketrans({"A": "U", "T": "A", "C": "G", "G": "C"})

LINE_BREAKS = re.compile(r"[\r\n]")
WHITESPACE = re.compile(r"\s")


def normalize(seq: str, strip_whitespace: bool = False) -> str:
    """
    Strip embedded line breaks and uppercase a raw sequence.

    Args:
        seq: Raw sequence text
        strip_whitespace: Remove all whitespace, not only line breaks

    Returns:
        Normalized sequence
    """
    pattern = WHITESPACE if strip_whitespace else LINE_BREAKS
    return pattern.sub("", seq).upper()


def transcribe(dna: str, strip_whitespace: bool = False) -> str:
    """
    Transcribe a DNA sequence into its mRNA complement.

    Each base is paired independently (A->U, T->A, C->G, G->C) and the
    order is preserved; this is not a reverse complement.

    Args:
        dna: DNA sequence, any case, may contain line breaks
        strip_whitespace: Remove all whitespace before transcribing

    Returns:
        RNA sequence of the same length as the normalized input

    Raises:
        MalformedSequence: If the length is not a multiple of 3
        InvalidSymbol: On the first character outside A, C, G, T
    """
    dna = normalize(dna, strip_whitespace)
    check_codon_aligned(dna)

    for pos, base in enumerate(dna):
        if base not in DNA_ALPHABET:
            raise InvalidSymbol(base, pos, DNA_ALPHABET)

    logger.debug("Transcribing %d nucleotides", len(dna))
    return dna.translate(RNA_TABLE)


def translate(rna: str, strip_whitespace: bool = False) -> str:
    """
    Translate an mRNA sequence into three-letter amino-acid codes.

    Codons are read left to right without overlap; the codes are joined
    with no separator and stop codons are rendered as ``-``.

    Args:
        rna: RNA sequence, any case, may contain line breaks
        strip_whitespace: Remove all whitespace before translating

    Returns:
        Concatenated amino-acid codes, e.g. ``"CysAlaGly"``

    Raises:
        MalformedSequence: If the sequence is not ASCII or its length is not
            a multiple of 3
        InvalidSymbol: On the first character outside A, C, G, U
    """
    rna = normalize(rna, strip_whitespace)
    indices = codon_indices(rna)
    logger.debug("Translating %d codons", len(indices))
    return "".join(AMINO_ACIDS[i] for i in indices)
