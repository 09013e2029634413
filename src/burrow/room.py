from typing import List, Optional, Sequence, Tuple

from .amphipod import Amphipod


class Room:
    """A side room holding up to ``depth`` amphipods.

    Slot 0 is right below the doorway, slot ``depth - 1`` is the back wall.
    Depths returned by ``try_accept`` and ``try_release`` are 1-based step
    counts between the doorway and the slot.
    """

    def __init__(
        self,
        kind: Amphipod,
        depth: int,
        slots: Optional[Sequence[Optional[Amphipod]]] = None,
    ):
        if depth <= 0:
            raise ValueError("room depth must be positive")
        self.kind = kind
        self.depth = depth
        if slots is None:
            self.slots: List[Optional[Amphipod]] = [None] * depth
        else:
            if len(slots) != depth:
                raise ValueError(
                    f"room for {kind.symbol} expects {depth} slots, got {len(slots)}"
                )
            self.slots = list(slots)
        gap = _floating_slot(self.slots)
        if gap is not None:
            raise ValueError(
                f"room for {kind.symbol} has an amphipod above empty slot {gap}"
            )

    def put(self, index: int, pod: Amphipod) -> None:
        """Place an amphipod in a slot regardless of its kind.

        The slot behind it, if any, must already be taken.
        """
        if not 0 <= index < self.depth:
            raise ValueError(f"slot {index} outside room of depth {self.depth}")
        if index + 1 < self.depth and self.slots[index + 1] is None:
            raise ValueError(f"slot {index + 1} below slot {index} is empty")
        self.slots[index] = pod

    def occupants(self) -> List[Amphipod]:
        return [pod for pod in self.slots if pod is not None]

    def is_full(self) -> bool:
        return all(slot is not None for slot in self.slots)

    def organized(self) -> bool:
        """Does every occupied slot hold this room's kind?"""
        return self.organized_from(0)

    def organized_from(self, index: int) -> bool:
        return all(pod is None or pod == self.kind for pod in self.slots[index:])

    def is_complete(self) -> bool:
        """Full of the right kind of amphipod."""
        return self.is_full() and self.organized()

    def can_accept(self, pod: Amphipod) -> bool:
        # Foreign amphipods must all leave before anyone may enter.
        return pod == self.kind and self.organized() and not self.is_full()

    def try_accept(self, pod: Amphipod) -> Optional[int]:
        """Move an amphipod into the deepest free slot.

        Returns:
            Steps from the doorway to the slot, or None if the room refuses
            the amphipod (in which case the room is left untouched)
        """
        if not self.can_accept(pod):
            return None

        for index in reversed(range(self.depth)):
            if self.slots[index] is None:
                self.slots[index] = pod
                return index + 1
        return None

    def try_release(self) -> Optional[Tuple[int, Amphipod]]:
        """Take the amphipod closest to the doorway out of the room.

        Amphipods that already sit on top of their own kind stay put.

        Returns:
            (steps from slot to doorway, amphipod), or None if nothing leaves
        """
        for index, pod in enumerate(self.slots):
            if pod is None:
                continue
            if self.organized_from(index):
                return None
            self.slots[index] = None
            return index + 1, pod
        return None

    def key(self) -> Tuple[Amphipod, Tuple[Optional[Amphipod], ...]]:
        return self.kind, tuple(self.slots)

    def copy(self) -> "Room":
        return Room(self.kind, self.depth, self.slots)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        contents = "".join(pod.symbol if pod else "." for pod in self.slots)
        return f"Room({self.kind.symbol}: {contents})"


def _floating_slot(slots: Sequence[Optional[Amphipod]]) -> Optional[int]:
    """Index of the first empty slot lying behind an occupied one."""
    for index in range(1, len(slots)):
        if slots[index] is None and slots[index - 1] is not None:
            return index
    return None
