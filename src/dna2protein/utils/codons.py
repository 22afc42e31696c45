"""Standard genetic code as a data-driven lookup table.

The table is derived once, at import time, from Biopython's NCBI translation
table 1 and converted to three-letter amino-acid codes. Two views are exposed:

* ``GENETIC_CODE``: codon string -> three-letter code (or ``STOP_MARKER``)
* ``AMINO_ACIDS``: 64-slot tuple indexed by the packed 2-bit codon encoding
  from :mod:`dna2protein.utils.encoding`
"""

from itertools import product
from types import MappingProxyType

from Bio.Data import CodonTable
from Bio.SeqUtils import seq3

RNA_ALPHABET = "UCAG"
STOP_MARKER = "-"
STANDARD_TABLE_ID = 1


def _build_genetic_code(table_id: int = STANDARD_TABLE_ID) -> dict[str, str]:
    """Map every RNA codon to its three-letter amino-acid code."""
    table = CodonTable.unambiguous_rna_by_id[table_id]
    code = {codon: seq3(aa) for codon, aa in table.forward_table.items()}
    for codon in table.stop_codons:
        code[codon] = STOP_MARKER
    return code


GENETIC_CODE = MappingProxyType(_build_genetic_code())

# Order matches the base codes used for packing (U=0, C=1, A=2, G=3)
CODONS = tuple("".join(c) for c in product(RNA_ALPHABET, repeat=3))
AMINO_ACIDS = tuple(GENETIC_CODE[codon] for codon in CODONS)
STOP_CODONS = frozenset(c for c, aa in GENETIC_CODE.items() if aa == STOP_MARKER)

