import logging
from functools import wraps
from typing import Any, Callable

from flask import current_app, request
from flask_socketio import emit

from roomserver import socketio
from roomserver.exceptions import InvalidAction, RoomFull
from roomserver.schemas import ChooseRequest, ClickRequest, MoveRequest, RoomRequest, parse_request
from roomserver.sessions.registry import GameRooms

logger = logging.getLogger(__name__)

FULL_EVENTS = {'ttt': 'room:full', 'rps': 'rps:full'}


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _game_rooms() -> GameRooms:
    return current_app.extensions['game_rooms']


def room_action(handler: Callable[..., None]) -> Callable[[Any], None]:
    """Run a handler to completion under the rooms lock.

    RoomFull is answered to the requester only; InvalidAction is dropped.
    """

    @wraps(handler)
    def wrapper(data: Any = None) -> None:
        rooms = _game_rooms()
        sid = _get_sid()
        try:
            with rooms.lock:
                handler(rooms, sid, data)
        except RoomFull as exc:
            emit(FULL_EVENTS[exc.game])
        except InvalidAction as exc:
            logger.debug(f"[dropped] event={handler.__name__} sid={sid} reason={exc.reason}")

    return wrapper


@room_action
def handle_room_join(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(RoomRequest, data)
    rooms.tictactoe.join(req.room_id, sid)


@room_action
def handle_start_bot(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(RoomRequest, data)
    rooms.tictactoe.start_bot(req.room_id)


@room_action
def handle_game_move(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(MoveRequest, data)
    rooms.tictactoe.move(req.room_id, sid, req.index)


@room_action
def handle_game_reset(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(RoomRequest, data)
    rooms.tictactoe.reset(req.room_id)


@room_action
def handle_rps_join(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(RoomRequest, data)
    rooms.rps.join(req.room_id, sid)


@room_action
def handle_rps_choose(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(ChooseRequest, data)
    rooms.rps.choose(req.room_id, sid, req.choice)


@room_action
def handle_rps_reset(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(RoomRequest, data)
    rooms.rps.reset(req.room_id)


@room_action
def handle_find_join(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(RoomRequest, data)
    rooms.find_number.join(req.room_id, sid)


@room_action
def handle_find_click(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(ClickRequest, data)
    rooms.find_number.click(req.room_id, sid, req.num)


@room_action
def handle_find_reset(rooms: GameRooms, sid: str, data: Any) -> None:
    req = parse_request(RoomRequest, data)
    rooms.find_number.reset(req.room_id)


def handle_connect(auth=None):
    logger.debug(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    rooms = _game_rooms()
    with rooms.lock:
        rooms.disconnect(sid)
    logger.debug(f"[disconnect] sid={sid} reason={reason}")


def handle_error(exc: Exception) -> None:
    # Keep the server up whatever a handler raised
    logger.exception(f"[handler-error] sid={_get_sid()} error={exc!r}")


EVENT_HANDLERS = {
    'room:join': handle_room_join,
    'room:startBot': handle_start_bot,
    'game:move': handle_game_move,
    'game:reset': handle_game_reset,
    'rps:join': handle_rps_join,
    'rps:choose': handle_rps_choose,
    'rps:reset': handle_rps_reset,
    'find:join': handle_find_join,
    'find:click': handle_find_click,
    'find:reset': handle_find_reset,
}


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for event, handler in EVENT_HANDLERS.items():
        socketio.on_event(event, handler, namespace=namespace)
    socketio.on_error(namespace)(handle_error)
