import logging
from typing import Any, Dict

from roomserver.exceptions import InvalidAction, RoomFull
from roomserver.models import RpsChoice, RpsPlayer, RpsRole, RpsRoom
from roomserver.services.games.rps import decide
from .base import RoomCoordinator

logger = logging.getLogger(__name__)

MAX_PLAYERS = 2


class RpsSessions(RoomCoordinator[RpsRoom]):
    """Rock-Paper-Scissors rooms: lobby -> picking -> revealed -> (reset) picking.

    Choices stay server-side until both roles have picked; until then the
    room only ever learns how many choices are in.
    """

    game = 'rps'

    def join(self, room_id: str, connection_id: str) -> RpsRole:
        room = self.store.get_or_create(room_id)
        player = room.find_player(connection_id)
        if player is None:
            if len(room.players) >= MAX_PLAYERS:
                logger.info(f"[rps-full] room={room_id} sid={connection_id}")
                raise RoomFull(self.game, room_id)
            role = RpsRole.B if room.player_for_role(RpsRole.A) else RpsRole.A
            player = RpsPlayer(id=connection_id, role=role)
            room.players.append(player)
            logger.info(f"[rps-join] room={room_id} sid={connection_id} role={role.value}")
        self.transport.join_group(connection_id, self.group(room_id))
        joined: Dict[str, Any] = {'roomId': room_id, 'role': player.role.value}
        joined.update(room.to_dict())
        self.transport.send(connection_id, 'rps:joined', joined)
        self.broadcast(room_id, 'rps:update', room.to_dict())
        return player.role

    def choose(self, room_id: str, connection_id: str, choice: RpsChoice) -> None:
        room = self.store.get(room_id)
        if room is None:
            raise InvalidAction(f"unknown room {room_id!r}")
        if room.find_player(connection_id) is None:
            raise InvalidAction('not a player in this room')
        if room.result is not None:
            raise InvalidAction('round already revealed')

        room.choices[connection_id] = choice
        player_a = room.player_for_role(RpsRole.A)
        player_b = room.player_for_role(RpsRole.B)
        if player_a and player_b and player_a.id in room.choices and player_b.id in room.choices:
            room.result = decide(room.choices[player_a.id], room.choices[player_b.id])
            logger.info(f"[rps-reveal] room={room_id} result={room.result}")
            self.broadcast(room_id, 'rps:reveal', room.reveal_dict())
            return

        logger.info(f"[rps-choose] room={room_id} sid={connection_id} count={len(room.choices)}")
        self.broadcast(room_id, 'rps:update', room.to_dict())

    def reset(self, room_id: str) -> None:
        room = self.store.get(room_id)
        if room is None:
            raise InvalidAction(f"unknown room {room_id!r}")
        room.choices.clear()
        room.result = None
        logger.info(f"[rps-reset] room={room_id}")
        self.broadcast(room_id, 'rps:update', room.to_dict())

    def forget_player(self, room: RpsRoom, connection_id: str) -> None:
        room.choices.pop(connection_id, None)

    def broadcast_after_leave(self, room: RpsRoom) -> None:
        self.broadcast(room.room_id, 'rps:update', room.to_dict())
