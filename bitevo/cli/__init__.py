"""
Command Line Interface for bitevo.
"""

from .evolve import evolve_command, main

__all__ = [
    'evolve_command',
    'main'
]
