"""
Utility modules
"""

from .sequence_utils import reverse_complement, reverse_quality, wrap_sequence, FASTA_WRAP_WIDTH
from .misc import open_text_input, open_text_output, iter_fasta, iter_fastq
__all__ = [
    'reverse_complement',
    'reverse_quality',
    'wrap_sequence',
    'FASTA_WRAP_WIDTH',
    'open_text_input',
    'open_text_output',
    'iter_fasta',
    'iter_fastq'
]
