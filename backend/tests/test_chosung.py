from twentyq.chosung import PLACEHOLDER, extract_chosung


def test_extracts_initials_for_hangul_syllables():
    assert extract_chosung('사과') == 'ㅅㄱ'
    assert extract_chosung('아이폰') == 'ㅇㅇㅍ'
    # double consonants and the block edges
    assert extract_chosung('까치') == 'ㄲㅊ'
    assert extract_chosung('가힣') == 'ㄱㅎ'


def test_passes_through_characters_outside_the_block():
    assert extract_chosung('아이폰 15') == 'ㅇㅇㅍ 15'
    assert extract_chosung('apple') == 'apple'
    # bare jamo are not syllable blocks
    assert extract_chosung('ㅋㅋ') == 'ㅋㅋ'


def test_empty_or_missing_word_gives_placeholder():
    assert extract_chosung('') == PLACEHOLDER
    assert extract_chosung(None) == PLACEHOLDER
