"""
Records module - read record structure and output emitters
"""

from .read_record import ReadRecord
from .emitter import FastaEmitter, FastqEmitter

__all__ = [
    'ReadRecord',
    'FastaEmitter',
    'FastqEmitter',
]
