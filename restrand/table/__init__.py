"""
Orientation table loading
"""

from .table_loader import OrientationTable, load_orientation_table, build_orientation_table, read_table

__all__ = [
    'OrientationTable',
    'load_orientation_table',
    'build_orientation_table',
    'read_table',
]
