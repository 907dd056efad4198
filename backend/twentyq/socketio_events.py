from flask import current_app, request
from flask_socketio import close_room, emit, join_room, leave_room
from typing import Any, Dict, Iterable

from twentyq import socketio
from twentyq.services.game.dispatcher import GameDispatcher, Outbound
from twentyq.services.game.notifications import CLOSE, JOIN, LEAVE, Membership


def channel(room_code: str) -> str:
    return f"room:{room_code}"


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _namespace() -> str:
    return current_app.config.get('SOCKETIO_NAMESPACE', '/ws')


def _dispatcher() -> GameDispatcher:
    return current_app.extensions['twentyq']['dispatcher']


def _payload(data) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def deliver(outbound: Iterable[Outbound]) -> None:
    """Send dispatcher output in order: room membership changes and emits."""
    namespace = _namespace()
    for item in outbound:
        if isinstance(item, Membership):
            if item.action == JOIN:
                join_room(channel(item.room), sid=item.sid, namespace=namespace)
            elif item.action == LEAVE:
                leave_room(channel(item.room), sid=item.sid, namespace=namespace)
            elif item.action == CLOSE:
                close_room(channel(item.room), namespace=namespace)
            continue
        to = item.sid if item.is_unicast else channel(item.room)
        socketio.emit(item.event, item.payload, to=to, namespace=namespace)


def handle_connect(auth=None):
    emit('connected', {'message': f'Connected to {_namespace()}'})


def handle_disconnect(reason=None):
    sid = _get_sid()
    outbound = _dispatcher().disconnect(sid)
    if outbound:
        current_app.logger.info(f"[disconnect] sid={sid} reason={reason} outbound={len(outbound)}")
    deliver(outbound)


def handle_create_room(data):
    data = _payload(data)
    deliver(_dispatcher().create_room(_get_sid(), data.get('roomCode'), data.get('nickname'), data.get('word')))


def handle_join_room(data):
    data = _payload(data)
    deliver(_dispatcher().join_room(_get_sid(), data.get('roomCode'), data.get('nickname')))


def handle_send_hint(data):
    data = _payload(data)
    deliver(_dispatcher().send_hint(_get_sid(), data.get('roomCode'), data.get('text')))


def handle_ask_question(data):
    data = _payload(data)
    deliver(_dispatcher().ask_question(_get_sid(), data.get('roomCode'), data.get('text'), data.get('nickname')))


def handle_answer_question(data):
    data = _payload(data)
    deliver(_dispatcher().answer_question(_get_sid(), data.get('roomCode'), data.get('questionId'), data.get('kind')))


def handle_send_chat_message(data):
    data = _payload(data)
    deliver(_dispatcher().send_chat_message(_get_sid(), data.get('roomCode'), data.get('text'), data.get('nickname')))


def handle_kick_player(data):
    data = _payload(data)
    deliver(_dispatcher().kick_player(_get_sid(), data.get('roomCode'), data.get('playerId')))


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on ``namespace``.

    Event names follow the browser client's protocol (camelCase).
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('createRoom', handle_create_room, namespace=namespace)
    socketio.on_event('joinRoom', handle_join_room, namespace=namespace)
    socketio.on_event('sendHint', handle_send_hint, namespace=namespace)
    socketio.on_event('askQuestion', handle_ask_question, namespace=namespace)
    socketio.on_event('answerQuestion', handle_answer_question, namespace=namespace)
    socketio.on_event('sendChatMessage', handle_send_chat_message, namespace=namespace)
    socketio.on_event('kickPlayer', handle_kick_player, namespace=namespace)
