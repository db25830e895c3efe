"""
Configuration module
"""

from .run_config import RestrandConfig

__all__ = [
    'RestrandConfig',
]
