"""
Amphipod burrow model: rooms, hallway, states and legal moves.
"""

from .amphipod import Amphipod
from .hallway import DOORWAYS, Hallway
from .moves import Move, MoveGenerator, MoveKind, Successor
from .parser import DiagramError, parse_burrow, unfold_diagram
from .room import Room
from .state import State

__all__ = [
    "Amphipod",
    "DOORWAYS",
    "DiagramError",
    "Hallway",
    "Move",
    "MoveGenerator",
    "MoveKind",
    "Room",
    "State",
    "Successor",
    "parse_burrow",
    "unfold_diagram",
]
