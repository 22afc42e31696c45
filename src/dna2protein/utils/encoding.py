"""Packed 2-bit codon encoding."""

import numpy as np

from dna2protein.exceptions import InvalidSymbol, MalformedSequence
from dna2protein.utils.codons import RNA_ALPHABET

# Byte value -> base code (U=0, C=1, A=2, G=3), -1 for anything else
BASE_CODES = np.full(256, -1, dtype=np.int8)
for _code, _base in enumerate(RNA_ALPHABET):
    BASE_CODES[ord(_base)] = _code
    BASE_CODES[ord(_base.lower())] = _code


def encode_bases(seq: str) -> np.ndarray:
    """
    Encode an ASCII RNA sequence as an array of 2-bit base codes.

    Args:
        seq: RNA sequence (ASCII only)

    Returns:
        numpy int8 array of shape (len(seq),) with values 0-3

    Raises:
        MalformedSequence: If the sequence is not ASCII
        InvalidSymbol: On the first character outside A, C, G, U
    """
    try:
        raw = np.frombuffer(seq.encode("ascii"), dtype=np.uint8)
    except UnicodeEncodeError as e:
        raise MalformedSequence(
            f"RNA sequence must be ASCII, found {seq[e.start]!r} at position {e.start + 1}"
        ) from None
    codes = BASE_CODES[raw]
    invalid = np.flatnonzero(codes < 0)
    if invalid.size:
        pos = int(invalid[0])
        raise InvalidSymbol(seq[pos], pos, RNA_ALPHABET)
    return codes


def check_codon_aligned(seq: str) -> None:
    """Raise MalformedSequence unless the length is a multiple of 3."""
    if len(seq) % 3 != 0:
        raise MalformedSequence(
            f"Sequence length ({len(seq)}) is not a multiple of 3", length=len(seq)
        )


def codon_indices(seq: str) -> np.ndarray:
    """
    Pack each codon of an RNA sequence into an index in [0, 64).

    Args:
        seq: RNA sequence whose length is a multiple of 3

    Returns:
        numpy int64 array of shape (len(seq) // 3,)
    """
    check_codon_aligned(seq)
    codes = encode_bases(seq).astype(np.int64).reshape(-1, 3)
    return (codes[:, 0] << 4) | (codes[:, 1] << 2) | codes[:, 2]
