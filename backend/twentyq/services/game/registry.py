import logging
from typing import Dict, List, Optional

from twentyq.errors import DuplicateRoom, MissingField, NotFound
from twentyq.models import Session

logger = logging.getLogger(__name__)


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ''


def normalize_code(room_code) -> str:
    return _text(room_code)


class RoomRegistry:
    """Room code -> live Session.

    One registry is built per application by ``create_app`` and handed to
    the dispatcher; it is the only place sessions are created or destroyed.
    """

    def __init__(self) -> None:
        self._rooms: Dict[str, Session] = {}

    def __contains__(self, room_code) -> bool:
        return normalize_code(room_code) in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def codes(self) -> List[str]:
        return list(self._rooms)

    def create(self, room_code: str, host_connection: str, host_name: str, secret_word: str) -> Session:
        code = normalize_code(room_code)
        name = _text(host_name)
        word = _text(secret_word)
        if not code:
            raise MissingField('방 코드를 입력하세요.')
        if not name:
            raise MissingField('닉네임을 입력하세요.')
        if not word:
            raise MissingField('정답 단어를 입력하세요.')
        if code in self._rooms:
            raise DuplicateRoom()
        session = Session(room_code=code, host_connection=host_connection, host_name=name, secret_word=word)
        self._rooms[code] = session
        logger.info(f"[room-create] room={code} host={host_connection} rooms={len(self._rooms)}")
        return session

    def get(self, room_code: str) -> Session:
        session = self._rooms.get(normalize_code(room_code))
        if session is None:
            raise NotFound()
        return session

    def destroy(self, room_code: str) -> Optional[Session]:
        session = self._rooms.pop(normalize_code(room_code), None)
        if session is not None:
            logger.info(f"[room-destroy] room={session.room_code} rooms={len(self._rooms)}")
        return session

    def rooms_for_connection(self, connection_id: str) -> List[Session]:
        """Sessions the connection hosts or has joined as a guesser."""
        return [
            s for s in self._rooms.values()
            if s.is_host(connection_id) or any(g.connection_id == connection_id for g in s.roster)
        ]
