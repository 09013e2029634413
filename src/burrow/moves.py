"""
Legal move generation for the amphipod burrow.

Neighbors of a state are computed on demand; nothing here keeps track of
previously seen states.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple

from .amphipod import Amphipod
from .hallway import doorway
from .room import Room
from .state import State


class MoveKind(Enum):
    HALL_TO_ROOM = "hall_to_room"
    ROOM_TO_ROOM = "room_to_room"
    ROOM_TO_HALL = "room_to_hall"


@dataclass(frozen=True)
class Move:
    """A single amphipod moving from one place to another.

    ``source`` and ``destination`` are hallway positions or room indices,
    depending on ``kind``.
    """

    kind: MoveKind
    amphipod: Amphipod
    source: int
    destination: int
    steps: int

    @property
    def cost(self) -> int:
        return self.amphipod.cost(self.steps)

    def __str__(self) -> str:
        where = {
            MoveKind.HALL_TO_ROOM: ("hall", "room"),
            MoveKind.ROOM_TO_ROOM: ("room", "room"),
            MoveKind.ROOM_TO_HALL: ("room", "hall"),
        }
        src, dest = where[self.kind]
        return (
            f"{self.amphipod.symbol}: {src} {self.source} -> {dest} "
            f"{self.destination} ({self.steps} steps, {self.cost} energy)"
        )


class Successor(NamedTuple):
    cost: int
    state: State
    move: Move


class MoveGenerator:
    """Enumerates every state reachable from a state by moving one amphipod."""

    def successors(self, state: State) -> List[Successor]:
        successors: List[Successor] = []

        for index in range(len(state.rooms)):
            successors.extend(self._hall_to_room(state, index))

            source_room = state.rooms[index].copy()
            released = source_room.try_release()
            if released is None:
                continue
            exit_steps, pod = released
            successors.extend(
                self._room_to_room(state, index, source_room, exit_steps, pod)
            )
            successors.extend(
                self._room_to_hall(state, index, source_room, exit_steps, pod)
            )

        return successors

    def _hall_to_room(self, state: State, index: int) -> List[Successor]:
        moves = []
        target = state.rooms[index]
        for position, pod in state.hallway.occupied():
            if not target.can_accept(pod):
                continue
            walk = state.hallway.path_length(position, doorway(index), to_room=True)
            if walk is None:
                continue

            room = target.copy()
            enter_steps = room.try_accept(pod)
            hallway = state.hallway.copy()
            hallway[position] = None

            move = Move(
                MoveKind.HALL_TO_ROOM, pod, position, index, walk + enter_steps
            )
            moves.append(
                Successor(
                    move.cost,
                    state.replace(hallway=hallway, rooms=[(index, room)]),
                    move,
                )
            )
        return moves

    def _room_to_room(
        self,
        state: State,
        index: int,
        source_room: Room,
        exit_steps: int,
        pod: Amphipod,
    ) -> List[Successor]:
        moves = []
        for other in range(len(state.rooms)):
            if other == index or not state.rooms[other].can_accept(pod):
                continue
            walk = state.hallway.path_length(
                doorway(index), doorway(other), to_room=True
            )
            if walk is None:
                continue

            room = state.rooms[other].copy()
            enter_steps = room.try_accept(pod)

            move = Move(
                MoveKind.ROOM_TO_ROOM,
                pod,
                index,
                other,
                exit_steps + walk + enter_steps,
            )
            moves.append(
                Successor(
                    move.cost,
                    state.replace(rooms=[(index, source_room), (other, room)]),
                    move,
                )
            )
        return moves

    def _room_to_hall(
        self,
        state: State,
        index: int,
        source_room: Room,
        exit_steps: int,
        pod: Amphipod,
    ) -> List[Successor]:
        moves = []
        for position in state.hallway.resting_spots():
            walk = state.hallway.path_length(doorway(index), position, to_room=False)
            if walk is None:
                continue

            hallway = state.hallway.copy()
            hallway[position] = pod

            move = Move(MoveKind.ROOM_TO_HALL, pod, index, position, exit_steps + walk)
            moves.append(
                Successor(
                    move.cost,
                    state.replace(hallway=hallway, rooms=[(index, source_room)]),
                    move,
                )
            )
        return moves
