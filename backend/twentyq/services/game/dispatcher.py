import functools
import logging
import threading
from typing import List, Optional, Union

from twentyq.errors import GameError, NotFound
from twentyq.models import Session
from . import notifications, roster
from . import session as machine
from .notifications import CLOSE, JOIN, LEAVE, Membership, Notification
from .registry import RoomRegistry, normalize_code
from .session import AnswerQuestion, AskQuestion, Rules, SendChatMessage, SendHint

logger = logging.getLogger(__name__)

Outbound = Union[Notification, Membership]


def _serialized(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


def _as_int(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        value = value.strip()
        return int(value) if value.isascii() and value.isdecimal() else None
    if isinstance(value, int):
        return value
    return None


class GameDispatcher:
    """Single command processor for every room.

    Each public method takes the caller's connection id plus the command
    fields and returns the outbound items in delivery order. Commands are
    run one at a time under one lock, which is what keeps "one pending
    question" and "one session per code" true without finer locking.
    """

    def __init__(self, registry: RoomRegistry, rules: Optional[Rules] = None) -> None:
        self.registry = registry
        self.rules = rules or Rules()
        self._lock = threading.RLock()

    # ---- room lifecycle ----

    @_serialized
    def create_room(self, sid: str, room_code, nickname, word) -> List[Outbound]:
        try:
            session = self.registry.create(room_code, sid, nickname, word)
        except GameError as exc:
            logger.info(f"[create-rejected] room={normalize_code(room_code)!r} sid={sid} reason={type(exc).__name__}")
            return [notifications.error_msg(sid, exc.message)]
        return [
            Membership(JOIN, session.room_code, sid),
            notifications.room_joined(session, sid, self.rules.question_limit),
            notifications.players_update(session),
        ]

    @_serialized
    def join_room(self, sid: str, room_code, nickname) -> List[Outbound]:
        try:
            session = self.registry.get(room_code)
        except NotFound as exc:
            logger.info(f"[join-rejected] room={normalize_code(room_code)!r} sid={sid}")
            return [notifications.error_msg(sid, exc.message)]

        name = (nickname or '').strip() if isinstance(nickname, str) else ''
        name = name or self.rules.default_guesser_name
        if roster.join(session, sid, name):
            machine.announce(session, f'{name}님이 입장했습니다.')
            logger.info(f"[join] room={session.room_code} sid={sid} players={len(session.roster)}")
        # The new record reaches everyone through the chatUpdate resync below
        return [
            Membership(JOIN, session.room_code, sid),
            notifications.room_joined(session, sid, self.rules.question_limit),
            notifications.chat_update(session),
            notifications.players_update(session),
        ]

    @_serialized
    def kick_player(self, sid: str, room_code, player_id) -> List[Outbound]:
        session = self._lookup(room_code, 'kickPlayer')
        if session is None:
            return []
        try:
            guesser = roster.kick(session, sid, player_id)
        except GameError as exc:
            logger.debug(f"[drop] room={session.room_code} command=kickPlayer reason={type(exc).__name__}")
            return []
        logger.info(f"[kick] room={session.room_code} target={guesser.connection_id}")
        return [
            Membership(LEAVE, session.room_code, guesser.connection_id),
            notifications.kicked(session, guesser.connection_id),
            machine.announce(session, f'{guesser.name}님이 내보내졌습니다.'),
            notifications.players_update(session),
        ]

    @_serialized
    def disconnect(self, sid: str) -> List[Outbound]:
        out: List[Outbound] = []
        for session in self.registry.rooms_for_connection(sid):
            if session.is_host(sid):
                self.registry.destroy(session.room_code)
                logger.info(f"[room-closed] room={session.room_code} reason=host-disconnect")
                out.append(notifications.room_closed(session))
                out.append(Membership(CLOSE, session.room_code))
                continue
            guesser = roster.remove(session, sid)
            if guesser is None:
                continue
            logger.info(f"[leave] room={session.room_code} sid={sid} players={len(session.roster)}")
            out.append(machine.announce(session, f'{guesser.name}님이 나갔습니다.'))
            out.append(notifications.players_update(session))
        return out

    # ---- game commands ----

    def ask_question(self, sid: str, room_code, text, nickname=None) -> List[Outbound]:
        return self._apply(sid, room_code, AskQuestion(text=text, nickname=nickname))

    def answer_question(self, sid: str, room_code, question_id, kind) -> List[Outbound]:
        return self._apply(sid, room_code, AnswerQuestion(question_id=_as_int(question_id), kind=kind))

    def send_hint(self, sid: str, room_code, text) -> List[Outbound]:
        return self._apply(sid, room_code, SendHint(text=text))

    def send_chat_message(self, sid: str, room_code, text, nickname=None) -> List[Outbound]:
        return self._apply(sid, room_code, SendChatMessage(text=text, nickname=nickname))

    @_serialized
    def _apply(self, sid: str, room_code, command) -> List[Outbound]:
        session = self._lookup(room_code, type(command).__name__)
        if session is None:
            return []
        out: List[Outbound] = list(machine.apply(session, command, sid, self.rules))
        if session.game_over:
            # Terminal sessions free their code immediately
            self.registry.destroy(session.room_code)
            out.append(Membership(CLOSE, session.room_code))
        return out

    def _lookup(self, room_code, command_name: str) -> Optional[Session]:
        try:
            return self.registry.get(room_code)
        except NotFound:
            logger.debug(f"[drop] room={normalize_code(room_code)!r} command={command_name} reason=no such room")
            return None
