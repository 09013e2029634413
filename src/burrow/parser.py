"""
Parser for the burrow diagram.

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########
"""

import re
from typing import List, Optional, Sequence, Union

from ..util.logger import logger
from .amphipod import Amphipod
from .hallway import HALLWAY_LENGTH, Hallway, is_doorway
from .room import Room
from .state import State

ROOM_ROW = re.compile(r"^[# ]*#([^#\s])#([^#\s])#([^#\s])#([^#\s])#[# ]*$")
HALLWAY_ROW = re.compile(r"^#(.{%d})#$" % HALLWAY_LENGTH)

# Extra rows revealed when the diagram is unfolded.
FOLDED_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")

log = logger.bind(component="parser")


class DiagramError(ValueError):
    """The diagram does not describe a valid burrow."""


def _lines(diagram: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(diagram, str):
        lines = diagram.splitlines()
    else:
        lines = list(diagram)
    lines = [line.rstrip() for line in lines]

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _amphipod(symbol: str, line_number: int) -> Amphipod:
    try:
        return Amphipod.from_symbol(symbol)
    except ValueError:
        raise DiagramError(
            f"line {line_number}: unknown amphipod {symbol!r}"
        ) from None


def unfold_diagram(diagram: Union[str, Sequence[str]]) -> List[str]:
    """Insert the two hidden rows below the first room row."""
    lines = _lines(diagram)
    if len(lines) < 4:
        raise DiagramError("diagram too short to unfold")
    return lines[:3] + list(FOLDED_ROWS) + lines[3:]


def parse_burrow(
    diagram: Union[str, Sequence[str]], depth: Optional[int] = None
) -> State:
    """Parse a burrow diagram into its initial state.

    Args:
        diagram: Diagram text, or its lines
        depth: Expected room depth; inferred from the diagram when None

    Returns:
        The state described by the diagram

    Raises:
        DiagramError: if the diagram is malformed
    """
    lines = _lines(diagram)
    if len(lines) < 4:
        raise DiagramError("diagram needs a wall, a hallway, rooms and a floor")

    hallway_match = HALLWAY_ROW.match(lines[1])
    if hallway_match is None:
        raise DiagramError(f"line 2: expected a hallway of {HALLWAY_LENGTH} tiles")

    hallway = Hallway()
    for position, symbol in enumerate(hallway_match.group(1)):
        if symbol == ".":
            continue
        if is_doorway(position):
            raise DiagramError(f"line 2: amphipod standing on doorway {position}")
        hallway[position] = _amphipod(symbol, 2)

    rows = []
    for line_number, line in enumerate(lines[2:-1], start=3):
        match = ROOM_ROW.match(line)
        if match is None:
            raise DiagramError(f"line {line_number}: malformed room row {line!r}")
        rows.append(
            [
                None if symbol == "." else _amphipod(symbol, line_number)
                for symbol in match.groups()
            ]
        )

    if not rows:
        raise DiagramError("diagram has no room rows")
    if depth is not None and len(rows) != depth:
        raise DiagramError(f"expected rooms of depth {depth}, found {len(rows)}")
    if lines[-1].strip("# "):
        raise DiagramError(f"line {len(lines)}: expected the burrow floor")

    rooms = []
    for index, kind in enumerate(Amphipod.in_room_order()):
        column = [row[index] for row in rows]
        for level in range(1, len(column)):
            if column[level] is None and column[level - 1] is not None:
                raise DiagramError(
                    f"line {level + 3}: room {index} has an empty slot "
                    "below an amphipod"
                )
        rooms.append(Room(kind, len(rows), column))

    state = State(hallway, rooms)
    counts = state.token_counts()
    wrong = {
        kind.symbol: counts[kind]
        for kind in Amphipod
        if counts[kind] != len(rows)
    }
    if wrong:
        raise DiagramError(
            f"each amphipod kind must appear {len(rows)} times, got {wrong}"
        )

    log.debug(f"Parsed burrow with rooms of depth {len(rows)}")
    return state
