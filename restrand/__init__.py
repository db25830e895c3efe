"""
restrand - normalize the strand orientation of sequencing reads

Main features:
- FASTA mode: per-read orientation from a tab-delimited table
- FASTQ mode: orientation from 'orientation:+/-' header tags
- Reverse complement of reads not in the target orientation
- Quality string reversal and header rewriting for flipped reads
- Streaming, record-at-a-time processing of plain or gzipped input
"""

__version__ = "0.1.0"

# Export main API interfaces
from .api import restrand_fasta, restrand_fastq, run
from .config.run_config import RestrandConfig
from .orientation import Orientation, StrandNormalizer, RunStats
from .errors import RestrandError

__all__ = [
    '__version__',
    # Main API
    'restrand_fasta',
    'restrand_fastq',
    'run',
    'RestrandConfig',
    'Orientation',
    'StrandNormalizer',
    'RunStats',
    'RestrandError',
]
