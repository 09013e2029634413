from enum import Enum
from typing import Dict, Tuple


class Amphipod(Enum):
    AMBER = "A"
    BRONZE = "B"
    COPPER = "C"
    DESERT = "D"

    @property
    def energy(self) -> int:
        """Energy spent per step moved."""
        return _ENERGY[self]

    @property
    def room(self) -> int:
        """Index of the destination room, counted left to right."""
        return _ROOM[self]

    @property
    def symbol(self) -> str:
        return self.value

    def cost(self, steps: int) -> int:
        return steps * self.energy

    @classmethod
    def from_symbol(cls, symbol: str) -> "Amphipod":
        """Look up an amphipod by its diagram letter.

        Raises:
            ValueError: if the letter is not one of A, B, C or D
        """
        return cls(symbol)

    @classmethod
    def in_room_order(cls) -> Tuple["Amphipod", ...]:
        return tuple(sorted(cls, key=lambda pod: pod.room))


_ENERGY: Dict[Amphipod, int] = {
    Amphipod.AMBER: 1,
    Amphipod.BRONZE: 10,
    Amphipod.COPPER: 100,
    Amphipod.DESERT: 1000,
}

_ROOM: Dict[Amphipod, int] = {
    Amphipod.AMBER: 0,
    Amphipod.BRONZE: 1,
    Amphipod.COPPER: 2,
    Amphipod.DESERT: 3,
}
