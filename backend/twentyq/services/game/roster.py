from typing import Optional

from twentyq.errors import CannotKickHost, NotAuthorized, NotFound
from twentyq.models import Guesser, Session


def find(session: Session, connection_id: str) -> Optional[Guesser]:
    for guesser in session.roster:
        if guesser.connection_id == connection_id:
            return guesser
    return None


def join(session: Session, connection_id: str, name: str) -> bool:
    """Add a guesser in arrival order. Returns False if already present."""
    if session.is_host(connection_id) or find(session, connection_id):
        return False
    session.roster.append(Guesser(connection_id=connection_id, name=name))
    return True


def remove(session: Session, connection_id: str) -> Optional[Guesser]:
    guesser = find(session, connection_id)
    if guesser is not None:
        session.roster.remove(guesser)
    return guesser


def kick(session: Session, requester: str, target: str) -> Guesser:
    if not session.is_host(requester):
        raise NotAuthorized()
    if session.is_host(target):
        raise CannotKickHost()
    guesser = remove(session, target)
    if guesser is None:
        raise NotFound('존재하지 않는 참가자입니다.')
    return guesser


def name_for(session: Session, connection_id: str, nickname: Optional[str] = None, fallback: str = '') -> str:
    """Display name for a connection: host name, roster name, nickname, fallback."""
    if session.is_host(connection_id):
        return session.host_name
    guesser = find(session, connection_id)
    if guesser is not None:
        return guesser.name
    name = nickname.strip() if isinstance(nickname, str) else ''
    return name or fallback
