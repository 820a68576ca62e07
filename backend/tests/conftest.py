import copy
import os
import sys
from collections import defaultdict

import pytest

# Ensure the backend root (containing the `roomserver` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from roomserver import create_app, socketio
from roomserver.sessions.registry import GameRooms


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    FIND_NUMBER_COUNT = 4
    RANDOM_SEED = 1234
    LOG_LEVEL = 'DEBUG'


class RecordingTransport:
    """In-memory stand-in for Socket.IO rooms.

    Broadcasts are fanned out to the members of the group at emit time, so
    `inbox[sid]` is exactly what that connection would have received.
    """

    def __init__(self):
        self.groups = defaultdict(set)
        self.inbox = defaultdict(list)
        self.log = []

    def send(self, connection_id, event, payload):
        payload = copy.deepcopy(payload)
        self.log.append(('send', connection_id, event, payload))
        self.inbox[connection_id].append((event, payload))

    def broadcast(self, group, event, payload):
        payload = copy.deepcopy(payload)
        self.log.append(('broadcast', group, event, payload))
        for member in sorted(self.groups[group]):
            self.inbox[member].append((event, payload))

    def join_group(self, connection_id, group):
        self.groups[group].add(connection_id)

    def drop(self, connection_id):
        for members in self.groups.values():
            members.discard(connection_id)

    def received(self, connection_id, event=None):
        return [payload for name, payload in self.inbox[connection_id] if event is None or name == event]

    def events(self, connection_id):
        return [name for name, _ in self.inbox[connection_id]]

    def clear(self):
        self.inbox.clear()
        self.log.clear()


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def rooms(transport):
    return GameRooms(transport, seed=1234, find_number_count=4)


@pytest.fixture()
def disconnect(rooms, transport):
    # Socket.IO stops delivering to a connection before its disconnect handler runs
    def _disconnect(connection_id):
        transport.drop(connection_id)
        rooms.disconnect(connection_id)
    return _disconnect


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_clients(flask_app):
    created = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _connect
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass
