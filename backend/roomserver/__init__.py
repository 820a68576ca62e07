import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', logging.INFO))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', '*')
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from roomserver.sessions.registry import GameRooms
    from roomserver.transport import SocketIOTransport

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    flask_app.extensions['game_rooms'] = GameRooms(
        SocketIOTransport(socketio, namespace=namespace),
        seed=flask_app.config.get('RANDOM_SEED'),
        find_number_count=int(flask_app.config.get('FIND_NUMBER_COUNT', 25)),
    )

    from roomserver.main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from roomserver.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    flask_app.logger.info(f"[startup] namespace={namespace} find_number_count={flask_app.config.get('FIND_NUMBER_COUNT')}")
    return flask_app
