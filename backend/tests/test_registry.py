import pytest

from twentyq.errors import DuplicateRoom, MissingField, NotFound
from twentyq.models import AwaitingQuestion


def test_create_starts_locked_and_empty(registry):
    session = registry.create('4242', 'host-sid', '출제자', ' 사과 ')
    assert session.room_code == '4242'
    assert session.secret_word == '사과'
    assert session.word_locked
    assert session.roster == []
    assert session.transcript == []
    assert session.question_count == 0
    assert session.pending_question_id is None
    assert not session.game_over
    assert isinstance(session.state, AwaitingQuestion)
    assert registry.get(' 4242 ') is session
    assert '4242' in registry
    assert len(registry) == 1


@pytest.mark.parametrize('code,name,word', [
    ('', '출제자', '사과'),
    ('   ', '출제자', '사과'),
    ('4242', '', '사과'),
    ('4242', '출제자', ''),
    ('4242', '출제자', '   '),
    (None, '출제자', '사과'),
])
def test_create_requires_code_name_and_word(registry, code, name, word):
    with pytest.raises(MissingField):
        registry.create(code, 'host-sid', name, word)
    assert len(registry) == 0


def test_duplicate_code_is_rejected(registry):
    first = registry.create('4242', 'host-sid', '출제자', '사과')
    with pytest.raises(DuplicateRoom):
        registry.create('4242', 'other-sid', '다른사람', '바나나')
    assert registry.get('4242') is first


def test_get_unknown_room(registry):
    with pytest.raises(NotFound):
        registry.get('nope')


def test_destroy_frees_code_for_reuse(registry):
    registry.create('4242', 'host-sid', '출제자', '사과')
    assert registry.destroy('4242') is not None
    assert '4242' not in registry
    assert registry.destroy('4242') is None
    again = registry.create('4242', 'new-host', '새출제자', '포도')
    assert again.secret_word == '포도'


def test_rooms_for_connection(registry):
    a = registry.create('A', 'host-a', 'Host A', '사과')
    b = registry.create('B', 'host-b', 'Host B', '포도')
    from twentyq.services.game import roster
    roster.join(b, 'host-a', 'visitor')
    assert registry.rooms_for_connection('host-a') == [a, b]
    assert registry.rooms_for_connection('host-b') == [b]
    assert registry.rooms_for_connection('stranger') == []
