from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .amphipod import Amphipod
from .hallway import NUM_ROOMS, Hallway
from .room import Room


class State:
    """One configuration of the burrow: the hallway plus four rooms.

    States are values. The move generator builds successors by copying the
    parts it changes and sharing the rest, so a State (and its rooms) must
    not be mutated once it has been handed out.
    """

    def __init__(self, hallway: Hallway, rooms: Sequence[Room]):
        if len(rooms) != NUM_ROOMS:
            raise ValueError(f"burrow has {NUM_ROOMS} rooms, got {len(rooms)}")
        depths = {room.depth for room in rooms}
        if len(depths) != 1:
            raise ValueError(f"rooms must share one depth, got {sorted(depths)}")
        for index, room in enumerate(rooms):
            if room.kind.room != index:
                raise ValueError(
                    f"room {index} cannot be the home of {room.kind.symbol}"
                )

        self.hallway = hallway
        self.rooms: Tuple[Room, ...] = tuple(rooms)
        self._hash: Optional[int] = None

    @property
    def depth(self) -> int:
        return self.rooms[0].depth

    @classmethod
    def from_rooms(
        cls, columns: Sequence[str], hallway: Optional[str] = None
    ) -> "State":
        """Build a state from per-room strings read from the doorway inward.

        ``State.from_rooms(["BA", "CD", "BC", "DA"])`` is the sample burrow;
        use ``.`` for an empty slot. ``hallway`` is an optional string of
        eleven cells in the same notation.
        """
        depth = len(columns[0])
        rooms = []
        for kind, column in zip(Amphipod.in_room_order(), columns):
            rooms.append(Room(kind, depth, [_cell(c) for c in column]))

        hall = Hallway()
        if hallway is not None:
            hall = Hallway([_cell(c) for c in hallway])
        return cls(hall, rooms)

    def organized(self) -> bool:
        """Is every room full of the right kind of amphipod?"""
        return self.hallway.is_empty() and all(
            room.is_complete() for room in self.rooms
        )

    def token_counts(self) -> Counter:
        counts = Counter(pod for _, pod in self.hallway.occupied())
        for room in self.rooms:
            counts.update(room.occupants())
        return counts

    def replace(
        self,
        hallway: Optional[Hallway] = None,
        rooms: Optional[List[Tuple[int, Room]]] = None,
    ) -> "State":
        """New state sharing every component not passed in."""
        new_rooms = list(self.rooms)
        for index, room in rooms or []:
            new_rooms[index] = room
        return State(hallway if hallway is not None else self.hallway, new_rooms)

    def copy(self) -> "State":
        return State(self.hallway.copy(), [room.copy() for room in self.rooms])

    def __eq__(self, other) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.hallway == other.hallway and self.rooms == other.rooms

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.hallway, self.rooms))
        return self._hash

    def __repr__(self) -> str:
        rooms = ",".join(
            "".join(pod.symbol if pod else "." for pod in room.slots)
            for room in self.rooms
        )
        return f"State(hall={self.hallway}, rooms={rooms})"

    def __str__(self) -> str:
        width = len(self.hallway) + 2
        lines = ["#" * width, f"#{self.hallway}#"]
        for level in range(self.depth):
            cells = "#".join(
                room.slots[level].symbol if room.slots[level] else "."
                for room in self.rooms
            )
            if level == 0:
                lines.append(f"###{cells}###")
            else:
                lines.append(f"  #{cells}#")
        lines.append("  " + "#" * (width - 4))
        return "\n".join(lines)


def _cell(char: str) -> Optional[Amphipod]:
    if char == ".":
        return None
    return Amphipod.from_symbol(char)
