import logging
from typing import Callable, Dict, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

RoomT = TypeVar('RoomT')


class RoomStore(Generic[RoomT]):
    """In-memory rooms for one game, keyed by the caller-chosen room id.

    Each game gets its own store, so the same id can exist independently in
    several games. Callers look rooms up by id on every event and never keep
    a reference across events.
    """

    def __init__(self, game: str, factory: Callable[[str], RoomT]):
        self.game = game
        self._factory = factory
        self._rooms: Dict[str, RoomT] = {}

    def get(self, room_id: str) -> Optional[RoomT]:
        return self._rooms.get(room_id)

    def get_or_create(self, room_id: str) -> RoomT:
        room = self._rooms.get(room_id)
        if room is None:
            room = self._factory(room_id)
            self._rooms[room_id] = room
            logger.info(f"[room-create] game={self.game} room={room_id}")
        return room

    def delete(self, room_id: str) -> None:
        if self._rooms.pop(room_id, None) is not None:
            logger.info(f"[room-delete] game={self.game} room={room_id}")

    def rooms_with_player(self, connection_id: str) -> List[RoomT]:
        # Snapshot so callers may delete while iterating
        return [
            room for room in self._rooms.values()
            if any(p.id == connection_id for p in room.players)
        ]

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
