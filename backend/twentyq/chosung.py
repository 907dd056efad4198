from typing import Optional

CHOSUNG = (
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ',
)

HANGUL_FIRST = 0xAC00
HANGUL_LAST = 0xD7A3
# 21 medial vowels * 28 finals per leading consonant
SYLLABLES_PER_INITIAL = 588

PLACEHOLDER = '?'


def extract_chosung(word: Optional[str]) -> str:
    """Return the leading consonant of every Hangul syllable in ``word``.

    Characters outside the syllable block are kept as-is, so
    ``extract_chosung('아이폰 15')`` gives ``'ㅇㅇㅍ 15'``.
    """
    if not word:
        return PLACEHOLDER
    out = []
    for ch in word:
        code = ord(ch)
        if HANGUL_FIRST <= code <= HANGUL_LAST:
            out.append(CHOSUNG[(code - HANGUL_FIRST) // SYLLABLES_PER_INITIAL])
        else:
            out.append(ch)
    return ''.join(out)
