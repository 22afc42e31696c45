"""Translate a DNA sequence into an amino-acid chain via its mRNA."""

import logging

from dna2protein.exceptions import SequenceError
from dna2protein.utils import (
    load_sequence_params,
    read_sequence,
    write_output,
    abort,
    transcribe,
)
from dna2protein.utils import translate as translate_rna

logger = logging.getLogger(__name__)


def register(subparsers):
    """Register the translate subcommand."""
    parser = subparsers.add_parser(
        "translate",
        help="Translate DNA to amino acids",
        description="""
Transcribe a DNA sequence into mRNA, then translate the mRNA codon by
codon into three-letter amino-acid codes. Stop codons are written as '-'.
""",
    )
    parser.add_argument("-f", "--file", required=True, help="Input DNA file, use - for stdin")
    parser.add_argument("-o", "--output", required=True, help="Output file, use - for stdout")
    parser.add_argument(
        "-r", "--rna", action="store_true",
        help="Also write the intermediate mRNA before the amino acids",
    )
    parser.add_argument("--params", dest="param_file", help="Settings file (KEY = VALUE)")
    parser.set_defaults(func=run)


def run(args):
    """Run the translate command."""
    try:
        settings = load_sequence_params(args.param_file)
    except (OSError, ValueError) as e:
        abort(f"Error when reading {args.param_file}: {e}")

    try:
        dna = read_sequence(args.file)
    except (OSError, UnicodeDecodeError) as e:
        abort(f"Error when reading {args.file}: {e}")

    try:
        rna = transcribe(dna, **settings)
    except SequenceError as e:
        abort(f"Error when transcribing DNA: {e}")

    try:
        amino_acids = translate_rna(rna)
    except SequenceError as e:
        abort(f"Error when translating mRNA: {e}")

    logger.info("Translated %d codons", len(rna) // 3)

    lines = [rna, amino_acids] if args.rna else [amino_acids]
    try:
        write_output(args.output, lines)
    except OSError as e:
        abort(f"Error when writing {args.output}: {e}")
