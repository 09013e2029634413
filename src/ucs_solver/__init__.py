"""
Uniform-cost solver for the amphipod burrow.

Finds the least total energy needed to move every amphipod into its room.
"""

from .config import SolverConfig
from .solver import FrontierEntry, UCSResult, UCSSolver

__all__ = ["UCSSolver", "UCSResult", "FrontierEntry", "SolverConfig"]
