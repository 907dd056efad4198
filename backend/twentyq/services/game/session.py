"""Per-room state machine.

``apply(session, command, caller, rules)`` validates one command against
the session, mutates it and returns the notifications to deliver. An
invalid command is never an exception: it is logged and yields ``[]``
with the session unchanged.

States: AwaitingQuestion -> AwaitingAnswer -> AwaitingQuestion ... until
an answer of ``correct`` or the last budgeted question moves the session
to Terminal, where nothing but chat is accepted.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from twentyq.chosung import extract_chosung
from twentyq.models import (
    ANSWER_KINDS, CORRECT, HOST_LOSE, HOST_WIN,
    AnswerRecord, AwaitingAnswer, AwaitingQuestion, ChatRecord, HintRecord,
    QuestionRecord, Session, SystemRecord, Terminal,
)
from . import notifications, roster
from .notifications import Notification

logger = logging.getLogger(__name__)

AUTO_HINT_SENDER = '자동 힌트'


@dataclass(frozen=True)
class Rules:
    question_limit: int = 20
    length_hint_at: int = 10
    chosung_hint_at: int = 15
    default_guesser_name: str = '정답자'
    hint_effect_trigger: str = '/fireworks'
    chat_effect_triggers: FrozenSet[str] = frozenset({'/confetti', '/hearts', '/shake'})

    @classmethod
    def from_config(cls, config) -> 'Rules':
        return cls(
            question_limit=int(config.get('QUESTION_LIMIT', 20)),
            length_hint_at=int(config.get('LENGTH_HINT_AT', 10)),
            chosung_hint_at=int(config.get('CHOSUNG_HINT_AT', 15)),
            default_guesser_name=config.get('DEFAULT_GUESSER_NAME', '정답자'),
            hint_effect_trigger=config.get('HINT_EFFECT_TRIGGER', '/fireworks'),
            chat_effect_triggers=frozenset(config.get('CHAT_EFFECT_TRIGGERS', ())),
        )


@dataclass(frozen=True)
class AskQuestion:
    text: str
    nickname: Optional[str] = None


@dataclass(frozen=True)
class AnswerQuestion:
    question_id: Optional[int]
    kind: str


@dataclass(frozen=True)
class SendHint:
    text: str


@dataclass(frozen=True)
class SendChatMessage:
    text: str
    nickname: Optional[str] = None


def _clean(text) -> str:
    return text.strip() if isinstance(text, str) else ''


def _drop(session: Session, command, reason: str) -> List[Notification]:
    logger.debug(f"[drop] room={session.room_code} command={type(command).__name__} reason={reason}")
    return []


def _effect_name(trigger: str) -> str:
    return trigger.lstrip('/') or trigger


def ask_question(session: Session, command: AskQuestion, caller: str, rules: Rules) -> List[Notification]:
    text = _clean(command.text)
    if session.game_over:
        return _drop(session, command, 'game over')
    if not text:
        return _drop(session, command, 'empty text')
    if session.is_host(caller):
        return _drop(session, command, 'host cannot ask')
    if not session.word_locked:
        return _drop(session, command, 'word not set')
    if session.pending_question_id is not None:
        return _drop(session, command, f'question {session.pending_question_id} pending')

    session.last_question_id += 1
    session.question_count += 1
    record = QuestionRecord(
        id=session.last_question_id,
        sender=roster.name_for(session, caller, command.nickname, rules.default_guesser_name),
        text=text,
    )
    session.transcript.append(record)
    session.state = AwaitingAnswer(record.id)
    logger.info(f"[question] room={session.room_code} id={record.id} count={session.question_count}/{rules.question_limit}")
    return [notifications.new_question(session, record)]


def answer_question(session: Session, command: AnswerQuestion, caller: str, rules: Rules) -> List[Notification]:
    if session.game_over:
        return _drop(session, command, 'game over')
    if not session.is_host(caller):
        return _drop(session, command, 'not host')
    if command.kind not in ANSWER_KINDS:
        return _drop(session, command, f'unknown kind {command.kind!r}')
    if command.question_id is None or command.question_id != session.pending_question_id:
        return _drop(session, command, f'question {command.question_id} is not pending')

    record = AnswerRecord(question_id=command.question_id, sender=session.host_name, kind=command.kind)
    session.transcript.append(record)
    logger.info(f"[answer] room={session.room_code} qid={record.question_id} kind={record.kind}")

    if command.kind == CORRECT:
        return _finish(session, record, HOST_LOSE)
    if session.question_count >= rules.question_limit:
        return _finish(session, record, HOST_WIN)

    session.state = AwaitingQuestion()
    out = [notifications.new_answer(session, record)]
    out.extend(_automatic_hints(session, rules))
    return out


def _finish(session: Session, record: AnswerRecord, outcome: str) -> List[Notification]:
    session.state = Terminal(outcome)
    logger.info(f"[game-over] room={session.room_code} outcome={outcome} questions={session.question_count}")
    return [notifications.new_answer(session, record), notifications.game_over(session)]


def _automatic_hints(session: Session, rules: Rules) -> List[Notification]:
    if session.question_count == rules.length_hint_at:
        text = f'정답은 {len(session.secret_word)}글자입니다.'
    elif session.question_count == rules.chosung_hint_at:
        text = f'초성 힌트: {extract_chosung(session.secret_word)}'
    else:
        return []
    record = HintRecord(sender=AUTO_HINT_SENDER, text=text)
    session.transcript.append(record)
    logger.info(f"[auto-hint] room={session.room_code} count={session.question_count}")
    return [notifications.new_hint(session, record)]


def send_hint(session: Session, command: SendHint, caller: str, rules: Rules) -> List[Notification]:
    text = _clean(command.text)
    if not session.is_host(caller):
        return _drop(session, command, 'not host')
    if not text:
        return _drop(session, command, 'empty text')
    if text == rules.hint_effect_trigger:
        return [notifications.effect(session, _effect_name(text), session.host_name)]
    if session.game_over:
        return _drop(session, command, 'game over')

    record = HintRecord(sender=session.host_name, text=text)
    session.transcript.append(record)
    logger.info(f"[hint] room={session.room_code}")
    return [notifications.new_hint(session, record)]


def send_chat_message(session: Session, command: SendChatMessage, caller: str, rules: Rules) -> List[Notification]:
    text = _clean(command.text)
    if not text:
        return _drop(session, command, 'empty text')
    if not session.is_host(caller) and roster.find(session, caller) is None:
        return _drop(session, command, 'not a participant')

    sender = roster.name_for(session, caller, command.nickname, rules.default_guesser_name)
    if text in rules.chat_effect_triggers:
        return [notifications.effect(session, _effect_name(text), sender)]

    record = ChatRecord(sender=sender, text=text)
    session.transcript.append(record)
    return [notifications.new_chat_message(session, record)]


def announce(session: Session, text: str) -> Notification:
    """Append a system line to the transcript and return its broadcast."""
    record = SystemRecord(text=text)
    session.transcript.append(record)
    return notifications.new_chat_message(session, record)


_HANDLERS = {
    AskQuestion: ask_question,
    AnswerQuestion: answer_question,
    SendHint: send_hint,
    SendChatMessage: send_chat_message,
}


def apply(session: Session, command, caller: str, rules: Rules) -> List[Notification]:
    handler = _HANDLERS.get(type(command))
    if handler is None:
        return _drop(session, command, 'unknown command')
    return handler(session, command, caller, rules)
