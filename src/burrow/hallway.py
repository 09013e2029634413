from typing import List, Optional, Sequence, Tuple

from .amphipod import Amphipod

HALLWAY_LENGTH = 11
NUM_ROOMS = 4

# Room i opens onto the hallway at 2 * i + 2:
#
# room:       0     1     2     3
# hall: 0  1  2  3  4  5  6  7  8  9  10
DOORWAYS: Tuple[int, ...] = tuple(2 * room + 2 for room in range(NUM_ROOMS))


def doorway(room: int) -> int:
    """Hallway position in front of a room."""
    if not 0 <= room < NUM_ROOMS:
        raise ValueError(f"no room with index {room}")
    return DOORWAYS[room]


def is_doorway(position: int) -> bool:
    return position in DOORWAYS


class Hallway:
    def __init__(self, slots: Optional[Sequence[Optional[Amphipod]]] = None):
        if slots is None:
            self.slots: List[Optional[Amphipod]] = [None] * HALLWAY_LENGTH
        else:
            if len(slots) != HALLWAY_LENGTH:
                raise ValueError(
                    f"hallway has {HALLWAY_LENGTH} slots, got {len(slots)}"
                )
            self.slots = list(slots)

    def __getitem__(self, position: int) -> Optional[Amphipod]:
        return self.slots[position]

    def __setitem__(self, position: int, pod: Optional[Amphipod]) -> None:
        if pod is not None and is_doorway(position):
            raise ValueError(f"amphipods cannot stop on doorway {position}")
        self.slots[position] = pod

    def __len__(self) -> int:
        return HALLWAY_LENGTH

    def occupied(self) -> List[Tuple[int, Amphipod]]:
        return [(position, pod) for position, pod in enumerate(self.slots) if pod]

    def is_empty(self) -> bool:
        return all(slot is None for slot in self.slots)

    def resting_spots(self) -> List[int]:
        return [p for p in range(len(self)) if not is_doorway(p)]

    def path_length(self, src: int, dest: int, to_room: bool) -> Optional[int]:
        """Steps needed to walk from ``src`` to ``dest``, if the way is clear.

        Every tile after ``src`` up to and including ``dest`` must be free.
        ``dest`` may only be a doorway when the walk carries on into the room
        behind it (``to_room``).
        """
        if src == dest:
            return None
        if not to_room and is_doorway(dest):
            return None

        low, high = min(src, dest), max(src, dest)
        for position in range(low, high + 1):
            if position == src:
                continue
            if self.slots[position] is not None:
                return None
        return high - low

    def copy(self) -> "Hallway":
        return Hallway(self.slots)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hallway):
            return NotImplemented
        return self.slots == other.slots

    def __hash__(self) -> int:
        return hash(tuple(self.slots))

    def __str__(self) -> str:
        return "".join(pod.symbol if pod else "." for pod in self.slots)
