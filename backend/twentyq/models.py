from dataclasses import dataclass, field
from typing import List, Optional, Union

# Outcomes are stored from the host's point of view; the guesser view is derived
HOST_WIN = 'hostWin'
HOST_LOSE = 'hostLose'
GUESSER_RESULT = {HOST_WIN: 'guesserLose', HOST_LOSE: 'guesserWin'}

YES, NO, IDK, CORRECT = 'yes', 'no', 'idk', 'correct'
ANSWER_KINDS = (YES, NO, IDK, CORRECT)


@dataclass
class Guesser:
    connection_id: str
    name: str

    def to_dict(self):
        return {'id': self.connection_id, 'name': self.name}


@dataclass
class QuestionRecord:
    id: int
    sender: str
    text: str

    def to_dict(self):
        return {'type': 'q', 'id': self.id, 'from': self.sender, 'text': self.text}


@dataclass
class AnswerRecord:
    question_id: int
    sender: str
    kind: str

    def to_dict(self):
        return {'type': 'a', 'qid': self.question_id, 'from': self.sender, 'kind': self.kind}


@dataclass
class HintRecord:
    sender: str
    text: str

    def to_dict(self):
        return {'type': 'hint', 'from': self.sender, 'text': self.text}


@dataclass
class ChatRecord:
    sender: str
    text: str

    def to_dict(self):
        return {'type': 'chat', 'from': self.sender, 'text': self.text}


@dataclass
class SystemRecord:
    text: str
    sender: str = 'system'

    def to_dict(self):
        return {'type': 'system', 'from': self.sender, 'text': self.text}


Record = Union[QuestionRecord, AnswerRecord, HintRecord, ChatRecord, SystemRecord]


# Lifecycle states. A session is exactly one of these at any time.
@dataclass(frozen=True)
class AwaitingQuestion:
    pass


@dataclass(frozen=True)
class AwaitingAnswer:
    question_id: int


@dataclass(frozen=True)
class Terminal:
    outcome: str


SessionState = Union[AwaitingQuestion, AwaitingAnswer, Terminal]


@dataclass
class Session:
    """Complete state of one room.

    The word is supplied at creation, so every live session is already
    locked. ``state`` is the only lifecycle field; the flags the client
    protocol expects (``waitingForAnswer``, ``gameOver``...) are derived
    from it.
    """

    room_code: str
    host_connection: str
    host_name: str
    secret_word: str
    roster: List[Guesser] = field(default_factory=list)
    transcript: List[Record] = field(default_factory=list)
    last_question_id: int = 0
    question_count: int = 0
    state: SessionState = field(default_factory=AwaitingQuestion)

    @property
    def word_locked(self) -> bool:
        return bool(self.secret_word)

    @property
    def pending_question_id(self) -> Optional[int]:
        if isinstance(self.state, AwaitingAnswer):
            return self.state.question_id
        return None

    @property
    def game_over(self) -> bool:
        return isinstance(self.state, Terminal)

    @property
    def outcome(self) -> Optional[str]:
        if isinstance(self.state, Terminal):
            return self.state.outcome
        return None

    @property
    def word_revealed(self) -> bool:
        return self.game_over

    @property
    def result_for_guesser(self) -> Optional[str]:
        return GUESSER_RESULT.get(self.outcome)

    @property
    def final_word(self) -> Optional[str]:
        return self.secret_word if self.word_revealed else None

    def is_host(self, connection_id: str) -> bool:
        return connection_id == self.host_connection

    def counters(self):
        return {
            'questionCount': self.question_count,
            'waitingForAnswer': self.pending_question_id,
            'wordLocked': self.word_locked,
            'gameOver': self.game_over,
            'gameResultForHost': self.outcome,
            'gameResultForGuesser': self.result_for_guesser,
            'finalWord': self.final_word,
        }
