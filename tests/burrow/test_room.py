import pytest

from src.burrow.amphipod import Amphipod
from src.burrow.room import Room

A = Amphipod.AMBER
B = Amphipod.BRONZE


class TestRoom:
    def test_room_creation(self):
        room = Room(A, 2)
        assert room.depth == 2
        assert room.slots == [None, None]
        assert room.organized()
        assert not room.is_full()
        assert not room.is_complete()

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            Room(A, 0)
        with pytest.raises(ValueError):
            Room(A, 2, [A])
        with pytest.raises(ValueError, match="above empty slot"):
            Room(A, 2, [A, None])

    def test_put_out_of_range(self):
        room = Room(A, 2)
        room.put(1, B)
        assert room.slots == [None, B]

        with pytest.raises(ValueError):
            room.put(2, A)
        with pytest.raises(ValueError):
            room.put(-1, A)

    def test_put_needs_the_slot_behind_taken(self):
        room = Room(A, 3)
        with pytest.raises(ValueError):
            room.put(0, A)
        assert room.slots == [None, None, None]

        room.put(2, B)
        room.put(1, A)
        assert room.slots == [None, A, B]

    def test_accept_fills_from_the_back(self):
        room = Room(A, 2)

        assert room.try_accept(A) == 2
        assert room.slots == [None, A]
        assert room.try_accept(A) == 1
        assert room.slots == [A, A]
        assert room.is_complete()

        assert room.try_accept(A) is None
        assert room.slots == [A, A]

    def test_accept_rejects_other_kinds(self):
        room = Room(A, 2)
        assert room.try_accept(B) is None
        assert room.slots == [None, None]

    def test_foreign_amphipod_blocks_entry(self):
        room = Room(A, 2, [A, B])
        assert not room.organized()
        assert room.try_accept(A) is None

        # The home amphipod on top has to leave to free the foreigner
        assert room.try_release() == (1, A)
        assert room.slots == [None, B]
        assert room.try_accept(A) is None

        assert room.try_release() == (2, B)
        assert room.slots == [None, None]
        assert room.try_accept(A) == 2

    def test_release_keeps_organized_amphipods(self):
        assert Room(B, 2, [B, B]).try_release() is None
        assert Room(B, 2, [None, B]).try_release() is None
        assert Room(B, 2).try_release() is None

    def test_release_takes_topmost(self):
        room = Room(B, 4, [None, A, B, B])
        assert room.try_release() == (2, A)
        assert room.slots == [None, None, B, B]
        assert room.try_release() is None

    def test_organized_from(self):
        room = Room(B, 4, [A, B, A, B])
        assert not room.organized_from(0)
        assert not room.organized_from(2)
        assert room.organized_from(3)

    def test_room_copy(self):
        room = Room(A, 2, [None, A])
        room_copy = room.copy()
        assert room_copy == room
        assert hash(room_copy) == hash(room)

        room_copy.try_accept(A)
        assert room.slots == [None, A]
        assert room_copy != room
