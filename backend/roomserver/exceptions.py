class RoomServerError(Exception):
    """Base class for errors raised by the room coordinators."""


class RoomFull(RoomServerError):
    """A join was attempted on a room whose seats are all taken."""

    def __init__(self, game: str, room_id: str):
        super().__init__(f"{game} room {room_id!r} is full")
        self.game = game
        self.room_id = room_id


class InvalidAction(RoomServerError):
    """An action that must be dropped without changing any state.

    Clients are not told about these; the handlers log them and move on.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
