"""Transcribe a DNA sequence into mRNA."""

import logging

from dna2protein.exceptions import SequenceError
from dna2protein.utils import load_sequence_params, read_sequence, write_output, abort
from dna2protein.utils import transcribe as transcribe_dna

logger = logging.getLogger(__name__)


def register(subparsers):
    """Register the transcribe subcommand."""
    parser = subparsers.add_parser(
        "transcribe",
        help="Transcribe DNA to mRNA",
        description="""
Pair every nucleotide of a DNA sequence with its RNA complement
(A->U, T->A, C->G, G->C), keeping the original order.
""",
    )
    parser.add_argument("-f", "--file", required=True, help="Input DNA file, use - for stdin")
    parser.add_argument("-o", "--output", required=True, help="Output file, use - for stdout")
    parser.add_argument("--params", dest="param_file", help="Settings file (KEY = VALUE)")
    parser.set_defaults(func=run)


def run(args):
    """Run the transcribe command."""
    try:
        settings = load_sequence_params(args.param_file)
    except (OSError, ValueError) as e:
        abort(f"Error when reading {args.param_file}: {e}")

    try:
        dna = read_sequence(args.file)
    except (OSError, UnicodeDecodeError) as e:
        abort(f"Error when reading {args.file}: {e}")

    try:
        rna = transcribe_dna(dna, **settings)
    except SequenceError as e:
        abort(f"Error when transcribing DNA: {e}")

    logger.info("Transcribed %d nucleotides", len(rna))

    try:
        write_output(args.output, [rna])
    except OSError as e:
        abort(f"Error when writing {args.output}: {e}")
