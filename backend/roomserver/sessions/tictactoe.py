import logging

from roomserver.exceptions import InvalidAction, RoomFull
from roomserver.models import Mark, TicTacToePlayer, TicTacToeRoom
from roomserver.services.games.bot import make_bot_move
from roomserver.services.games.tictactoe import calculate_winner, empty_board, is_draw, other_mark
from .base import RoomCoordinator

logger = logging.getLogger(__name__)

MAX_PLAYERS = 2


class TicTacToeSessions(RoomCoordinator[TicTacToeRoom]):
    """Tic-Tac-Toe rooms: lobby -> active -> won/drawn -> (reset) active.

    A bot room answers every human move with a bot move for the other mark,
    inside the same handler run, as a second `game:update`. On a board the
    human just filled the bot move changes nothing but still flips `turn`.

    A joiner gets X whenever no seated player holds it, rather than strictly by
    join count, so a room never ends up with two O players after X leaves.
    """

    game = 'ttt'

    def join(self, room_id: str, connection_id: str) -> Mark:
        room = self.store.get_or_create(room_id)
        player = room.find_player(connection_id)
        if player is None:
            if len(room.players) >= MAX_PLAYERS and not room.is_bot:
                logger.info(f"[ttt-full] room={room_id} sid={connection_id}")
                raise RoomFull(self.game, room_id)
            mark = Mark.O if any(p.mark == Mark.X for p in room.players) else Mark.X
            player = TicTacToePlayer(id=connection_id, mark=mark)
            room.players.append(player)
            logger.info(f"[ttt-join] room={room_id} sid={connection_id} mark={mark.value}")
        self.transport.join_group(connection_id, self.group(room_id))
        self.transport.send(connection_id, 'room:joined', {'roomId': room_id, 'mark': player.mark.value})
        self._broadcast_state(room)
        return player.mark

    def start_bot(self, room_id: str) -> None:
        room = self.store.get_or_create(room_id)
        room.is_bot = True
        logger.info(f"[ttt-bot] room={room_id} enabled")
        self._broadcast_state(room)

    def move(self, room_id: str, connection_id: str, index: int) -> None:
        room = self.store.get(room_id)
        if room is None:
            raise InvalidAction(f"unknown room {room_id!r}")
        if room.winner is not None:
            raise InvalidAction('game already won')
        player = room.find_player(connection_id)
        if player is None:
            raise InvalidAction('not a player in this room')
        if player.mark != room.turn:
            raise InvalidAction('not your turn')
        if not 0 <= index < len(room.board) or room.board[index] is not None:
            raise InvalidAction(f"cell {index} is not available")

        room.board[index] = player.mark
        room.turn = other_mark(player.mark)
        room.winner = calculate_winner(room.board)
        logger.info(
            f"[ttt-move] room={room_id} sid={connection_id} index={index} "
            f"winner={room.winner.value if room.winner else None}"
        )
        self._broadcast_state(room)

        if room.winner is None and room.is_bot:
            self._bot_move(room)

    def reset(self, room_id: str) -> None:
        room = self.store.get(room_id)
        if room is None:
            raise InvalidAction(f"unknown room {room_id!r}")
        room.board = empty_board()
        room.turn = Mark.X
        room.winner = None
        logger.info(f"[ttt-reset] room={room_id}")
        self._broadcast_state(room)

    def broadcast_after_leave(self, room: TicTacToeRoom) -> None:
        self._broadcast_state(room)

    def should_delete(self, room: TicTacToeRoom) -> bool:
        # Bot rooms outlive their players and are never reclaimed.
        return not room.players and not room.is_bot

    def _bot_move(self, room: TicTacToeRoom) -> None:
        bot_mark = room.turn
        room.board = make_bot_move(room.board, bot_mark, self.rng)
        room.turn = other_mark(bot_mark)
        room.winner = calculate_winner(room.board)
        logger.info(
            f"[ttt-bot-move] room={room.room_id} mark={bot_mark.value} "
            f"winner={room.winner.value if room.winner else None}"
        )
        self._broadcast_state(room)

    def _broadcast_state(self, room: TicTacToeRoom) -> None:
        self.broadcast(room.room_id, 'game:update', room.to_dict(is_draw=is_draw(room.board)))
