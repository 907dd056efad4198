import os
import sys
import pytest

# Ensure the backend root (containing the `twentyq` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from config import Config
from twentyq import create_app, socketio
from twentyq.models import Session
from twentyq.services.game.dispatcher import GameDispatcher
from twentyq.services.game.registry import RoomRegistry
from twentyq.services.game.session import Rules

NAMESPACE = '/ws'


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SOCKETIO_NAMESPACE = NAMESPACE


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def connect(flask_app):
    """Factory for Socket.IO test clients; every client is disconnected on teardown."""
    clients = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace=NAMESPACE,
        )
        # Drop the 'connected' greeting
        test_client.get_received(NAMESPACE)
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        try:
            if test_client.is_connected(NAMESPACE):
                test_client.disconnect(namespace=NAMESPACE)
        except Exception:
            pass


@pytest.fixture()
def sio_client(connect):
    return connect()


@pytest.fixture()
def rules():
    return Rules()


@pytest.fixture()
def registry():
    return RoomRegistry()


@pytest.fixture()
def dispatcher(registry, rules):
    return GameDispatcher(registry, rules)


@pytest.fixture()
def session():
    """A live room '4242' hosted by 'host-sid' with one guesser G1."""
    from twentyq.services.game import roster
    s = Session(room_code='4242', host_connection='host-sid', host_name='출제자', secret_word='사과')
    roster.join(s, 'g1-sid', 'G1')
    return s


def received(test_client):
    return test_client.get_received(NAMESPACE)


def payloads(packets, name):
    return [pkt['args'][0] for pkt in packets if pkt['name'] == name]
