#!/usr/bin/env python3
"""
Command line interface for restrand
"""

import sys
import argparse
import logging

from . import __version__
from .api import run
from .config.run_config import RestrandConfig
from .errors import RestrandError


logger = logging.getLogger("restrand")


def setup_logging(log_level=logging.INFO):
    """Setup logging configuration. Diagnostics go to stderr; stdout may carry sequences."""
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def build_parser():
    """Build the command line parser."""
    # Custom formatter that preserves formatting and shows defaults
    class CustomFormatter(argparse.RawDescriptionHelpFormatter, argparse.ArgumentDefaultsHelpFormatter):
        pass

    example_text = '''
Examples:
  FASTA with an orientation table, flipped reads tagged with /rc:
    restrand \\
        --fasta reads.fa.gz \\
        --table read_orientation.tsv \\
        --target-orientation + \\
        --flipped-suffix /rc \\
        --out reads.oriented.fa

  FASTQ with orientation:+/- tags in the headers, stdin to stdout:
    zcat reads.fq.gz | restrand --fastq -i - > reads.oriented.fq
'''

    parser = argparse.ArgumentParser(
        prog='restrand',
        description='Re-orient FASTA/FASTQ reads to a constant strand direction',
        formatter_class=CustomFormatter,
        epilog=example_text
    )

    parser.add_argument('-i', '--input', '-f', '--fasta', dest='input', type=str, default='-',
                        help="Input FASTA/FASTQ (plain or .gz); '-' reads plain text from stdin")
    parser.add_argument('-t', '--table', type=str, default=None,
                        help='Tab-delimited orientation table with header row (plain or .gz); required unless --fastq')
    parser.add_argument('-o', '--out', type=str, default=None,
                        help='Output path (default: stdout)')
    parser.add_argument('--fastq', action='store_true',
                        help="FASTQ input; orientation comes from 'orientation:+/-' header tags")
    parser.add_argument('--id-col', type=str, default='ReadName',
                        help='Name of the read ID column in the table')
    parser.add_argument('--orientation-col', type=str, default='orientation',
                        help="Name of the orientation column in the table")
    parser.add_argument('--target-orientation', type=str, default='+',
                        help="Target orientation to keep as-is; other reads are reverse-complemented. Allowed: '+' or '-'")
    parser.add_argument('--drop-missing', action='store_true',
                        help='Drop reads missing from the table instead of passing them through (FASTA only)')
    parser.add_argument('--flipped-suffix', type=str, default='',
                        help="Suffix appended to headers of flipped reads, e.g. '/rc' (FASTA only)")
    parser.add_argument('--reject-duplicates', action='store_true',
                        help='Fail when a read ID appears more than once in the table')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def main(argv=None):
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    setup_logging(getattr(logging, args.log_level.upper()))
    logger.debug(f"Arguments: {vars(args)}")

    try:
        config = RestrandConfig(
            input_path=args.input,
            table_path=args.table,
            output_path=args.out,
            fastq=args.fastq,
            id_col=args.id_col,
            orientation_col=args.orientation_col,
            target_orientation=args.target_orientation,
            drop_missing=args.drop_missing,
            flipped_suffix=args.flipped_suffix,
            reject_duplicates=args.reject_duplicates,
        )
        run(config)
    except (RestrandError, OSError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
