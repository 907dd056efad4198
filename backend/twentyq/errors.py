"""Error taxonomy shared by the registry, roster and dispatcher."""


class GameError(Exception):
    """Base class for rejected commands.

    ``message`` is the short user-facing text sent back in ``errorMsg``.
    """

    message = '요청을 처리할 수 없습니다.'

    def __init__(self, message=None):
        if message:
            self.message = message
        super().__init__(self.message)


class DuplicateRoom(GameError):
    message = '이미 존재하는 방 코드입니다.'


class NotFound(GameError):
    message = '존재하지 않는 방 코드입니다.'


class NotAuthorized(GameError):
    message = '권한이 없습니다.'


class CannotKickHost(NotAuthorized):
    message = '출제자는 내보낼 수 없습니다.'


class InvalidState(GameError):
    message = '지금은 할 수 없는 요청입니다.'


class MissingField(GameError):
    message = '필수 항목이 비어 있습니다.'
