from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Room state lives with the app instance, one registry per app
    from twentyq.services.game.dispatcher import GameDispatcher
    from twentyq.services.game.registry import RoomRegistry
    from twentyq.services.game.session import Rules
    registry = RoomRegistry()
    flask_app.extensions['twentyq'] = {
        'registry': registry,
        'dispatcher': GameDispatcher(registry, Rules.from_config(flask_app.config)),
    }

    from twentyq.main import main
    flask_app.register_blueprint(main)

    from twentyq.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from twentyq.socketio_events import register_socketio_handlers
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')
    register_socketio_handlers(namespace)
    flask_app.logger.info(f"[startup] socket.io namespace={namespace}")

    @click.command('chosung')
    @click.argument('word')
    def chosung_command(word):
        """Prints the initial-consonant hint a room would give for WORD."""
        from twentyq.chosung import extract_chosung
        click.echo(extract_chosung(word))

    flask_app.cli.add_command(chosung_command)

    return flask_app
