import logging
import random
from typing import Any, Dict, Generic, TypeVar

from roomserver.store import RoomStore
from roomserver.transport import Transport, group_name

logger = logging.getLogger(__name__)

RoomT = TypeVar('RoomT')


class RoomCoordinator(Generic[RoomT]):
    """Shared plumbing for the per-game coordinators."""

    game: str = ''

    def __init__(self, store: RoomStore[RoomT], transport: Transport, rng: random.Random):
        self.store = store
        self.transport = transport
        self.rng = rng

    def group(self, room_id: str) -> str:
        return group_name(self.game, room_id)

    def broadcast(self, room_id: str, event: str, payload: Dict[str, Any]) -> None:
        self.transport.broadcast(self.group(room_id), event, payload)

    def leave(self, connection_id: str) -> None:
        """Drop a departed connection from every room of this game."""
        for room in self.store.rooms_with_player(connection_id):
            room.players = [p for p in room.players if p.id != connection_id]
            self.forget_player(room, connection_id)
            logger.info(f"[{self.game}-leave] room={room.room_id} sid={connection_id} remaining={len(room.players)}")
            self.broadcast_after_leave(room)
            if self.should_delete(room):
                self.store.delete(room.room_id)

    def forget_player(self, room: RoomT, connection_id: str) -> None:
        """Clear per-player state other than the seat."""

    def broadcast_after_leave(self, room: RoomT) -> None:
        raise NotImplementedError

    def should_delete(self, room: RoomT) -> bool:
        return not room.players
