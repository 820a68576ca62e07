import random
import threading
from typing import Dict, Optional

from roomserver.models import FindNumberRoom, RpsRoom, TicTacToeRoom
from roomserver.services.games.find_number import new_numbers
from roomserver.store import RoomStore
from roomserver.transport import Transport
from .find_number import FindNumberSessions
from .rps import RpsSessions
from .tictactoe import TicTacToeSessions


class GameRooms:
    """Owns one room store and one coordinator per game.

    `lock` is held for the whole of each handler run, so every event is
    processed to completion (bot replies and broadcasts included) before the
    next one touches any room.
    """

    def __init__(self, transport: Transport, seed: Optional[int] = None, find_number_count: int = 25):
        self.rng = random.Random(seed)
        self.lock = threading.RLock()

        self.tictactoe = TicTacToeSessions(
            RoomStore('ttt', lambda room_id: TicTacToeRoom(room_id=room_id)),
            transport,
            self.rng,
        )
        self.rps = RpsSessions(
            RoomStore('rps', lambda room_id: RpsRoom(room_id=room_id)),
            transport,
            self.rng,
        )
        self.find_number = FindNumberSessions(
            RoomStore(
                'find',
                lambda room_id: FindNumberRoom(room_id=room_id, numbers=new_numbers(self.rng, find_number_count)),
            ),
            transport,
            self.rng,
            count=find_number_count,
        )

    @property
    def coordinators(self):
        return (self.tictactoe, self.rps, self.find_number)

    def disconnect(self, connection_id: str) -> None:
        """Remove a lost connection from every room in every game."""
        for coordinator in self.coordinators:
            coordinator.leave(connection_id)

    def room_counts(self) -> Dict[str, int]:
        return {c.game: len(c.store) for c in self.coordinators}
