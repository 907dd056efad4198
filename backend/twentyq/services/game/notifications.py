"""Outbound messages produced by the game services.

Nothing here talks to Socket.IO. ``Notification`` is an addressed event
(a single connection when ``sid`` is set, otherwise the whole room) and
``Membership`` tells the transport to attach, detach or dissolve a room
group. The transport adapter delivers both in list order.
"""

from dataclasses import dataclass
from typing import Any, Optional

from twentyq.models import Session

JOIN = 'join'
LEAVE = 'leave'
CLOSE = 'close'


@dataclass(frozen=True)
class Notification:
    event: str
    payload: Any = None
    room: Optional[str] = None
    sid: Optional[str] = None

    @property
    def is_unicast(self) -> bool:
        return self.sid is not None


@dataclass(frozen=True)
class Membership:
    action: str
    room: str
    sid: Optional[str] = None


def to_room(session: Session, event: str, payload=None) -> Notification:
    return Notification(event, payload, room=session.room_code)


def to_connection(sid: str, event: str, payload=None) -> Notification:
    return Notification(event, payload, sid=sid)


def room_joined(session: Session, sid: str, question_limit: int) -> Notification:
    is_host = session.is_host(sid)
    payload = {
        'role': 'host' if is_host else 'guesser',
        'roomCode': session.room_code,
        'word': session.secret_word if is_host else None,
        'questionLimit': question_limit,
    }
    payload.update(session.counters())
    return to_connection(sid, 'roomJoined', payload)


def players_update(session: Session) -> Notification:
    return to_room(session, 'playersUpdate', {
        'host': {'id': session.host_connection, 'name': session.host_name},
        'players': [g.to_dict() for g in session.roster],
    })


def chat_update(session: Session) -> Notification:
    payload = {'items': [r.to_dict() for r in session.transcript]}
    payload.update(session.counters())
    return to_room(session, 'chatUpdate', payload)


def new_question(session: Session, record) -> Notification:
    payload = record.to_dict()
    payload.update(session.counters())
    return to_room(session, 'newQuestion', payload)


def new_answer(session: Session, record) -> Notification:
    payload = record.to_dict()
    payload.update(session.counters())
    return to_room(session, 'newAnswer', payload)


def new_hint(session: Session, record) -> Notification:
    return to_room(session, 'newHint', record.to_dict())


def new_chat_message(session: Session, record) -> Notification:
    return to_room(session, 'newChatMessage', record.to_dict())


def game_over(session: Session) -> Notification:
    return to_room(session, 'gameOver', {
        'gameResultForHost': session.outcome,
        'gameResultForGuesser': session.result_for_guesser,
        'finalWord': session.final_word,
    })


def effect(session: Session, name: str, sender: str) -> Notification:
    return to_room(session, 'effect', {'effect': name, 'from': sender})


def room_closed(session: Session) -> Notification:
    return to_room(session, 'roomClosed', {'roomCode': session.room_code})


def kicked(session: Session, sid: str) -> Notification:
    return to_connection(sid, 'kicked', {'roomCode': session.room_code})


def error_msg(sid: str, message: str) -> Notification:
    return to_connection(sid, 'errorMsg', message)
