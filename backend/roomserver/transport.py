from typing import Any, Dict, Protocol

from flask_socketio import SocketIO


class Transport(Protocol):
    """What the coordinators need from the connection layer."""

    def send(self, connection_id: str, event: str, payload: Dict[str, Any]) -> None:
        ...

    def broadcast(self, group: str, event: str, payload: Dict[str, Any]) -> None:
        ...

    def join_group(self, connection_id: str, group: str) -> None:
        ...


def group_name(game: str, room_id: str) -> str:
    """Broadcast group for a room. Prefixed so games never share a group."""
    return f"{game}:{room_id}"


class SocketIOTransport:
    """Transport over Flask-SocketIO. Emits are fire-and-forget, in call order."""

    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send(self, connection_id: str, event: str, payload: Dict[str, Any]) -> None:
        self.socketio.emit(event, payload, to=connection_id, namespace=self.namespace)

    def broadcast(self, group: str, event: str, payload: Dict[str, Any]) -> None:
        self.socketio.emit(event, payload, to=group, namespace=self.namespace)

    def join_group(self, connection_id: str, group: str) -> None:
        self.socketio.server.enter_room(connection_id, group, namespace=self.namespace)
