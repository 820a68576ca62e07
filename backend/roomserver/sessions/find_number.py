import logging

from roomserver.exceptions import InvalidAction
from roomserver.models import FIRST_SEAT_COLOR, OTHER_SEAT_COLOR, FindNumberPlayer, FindNumberRoom
from roomserver.services.games.find_number import decide_winner, new_numbers
from .base import RoomCoordinator

logger = logging.getLogger(__name__)


class FindNumberSessions(RoomCoordinator[FindNumberRoom]):
    """Find Number rooms: players race to claim 1..N strictly in order."""

    game = 'find'

    def __init__(self, store, transport, rng, count: int = 25):
        super().__init__(store, transport, rng)
        self.count = count

    def join(self, room_id: str, connection_id: str) -> str:
        room = self.store.get_or_create(room_id)
        player = room.find_player(connection_id)
        if player is None:
            taken = any(p.color == FIRST_SEAT_COLOR for p in room.players)
            color = OTHER_SEAT_COLOR if taken else FIRST_SEAT_COLOR
            player = FindNumberPlayer(id=connection_id, color=color)
            room.players.append(player)
            room.score.setdefault(connection_id, 0)
            logger.info(f"[find-join] room={room_id} sid={connection_id} color={color}")
        self.transport.join_group(connection_id, self.group(room_id))
        self.transport.send(connection_id, 'find:joined', {
            'roomId': room_id,
            'color': player.color,
            'numbers': list(room.numbers),
            'claimed': room.claimed_payload(),
            'next': room.next,
            'score': dict(room.score),
            'winner': room.winner,
        })
        self.broadcast(room_id, 'find:update', room.to_dict())
        return player.color

    def click(self, room_id: str, connection_id: str, number: int) -> None:
        room = self.store.get(room_id)
        if room is None:
            raise InvalidAction(f"unknown room {room_id!r}")
        if room.find_player(connection_id) is None:
            raise InvalidAction('not a player in this room')
        if room.is_finished:
            raise InvalidAction('all numbers already claimed')
        if number != room.next or number in room.claimed:
            raise InvalidAction(f"{number} is not the next number ({room.next})")

        room.claimed[number] = connection_id
        room.score[connection_id] = room.score.get(connection_id, 0) + 1
        room.next += 1
        logger.info(f"[find-claim] room={room_id} sid={connection_id} number={number}")

        if room.is_finished:
            room.winner = decide_winner(room.score)
            logger.info(f"[find-reveal] room={room_id} winner={room.winner}")
            self.broadcast(room_id, 'find:reveal', room.reveal_dict())
            return
        self.broadcast(room_id, 'find:update', room.to_dict())

    def reset(self, room_id: str) -> None:
        room = self.store.get(room_id)
        if room is None:
            raise InvalidAction(f"unknown room {room_id!r}")
        room.numbers = new_numbers(self.rng, self.count)
        room.claimed.clear()
        room.next = 1
        room.score = {p.id: 0 for p in room.players}
        room.winner = None
        logger.info(f"[find-reset] room={room_id}")
        self.broadcast(room_id, 'find:update', room.to_dict())

    def forget_player(self, room: FindNumberRoom, connection_id: str) -> None:
        room.score.pop(connection_id, None)

    def broadcast_after_leave(self, room: FindNumberRoom) -> None:
        self.broadcast(room.room_id, 'find:update', room.to_dict())
