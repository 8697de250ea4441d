"""
Classic English Soundex.

The code is the first alphanumeric character of the input followed by one
digit per consonant sound group:

    B F P V          -> 1
    C G J K Q S X Z  -> 2
    D T              -> 3
    L                -> 4
    M N              -> 5
    R                -> 6

Vowels and H/W/Y are dropped but do not separate two consonants of the same
group. Default mode keeps 4 characters; full mode keeps every digit. Both pad
with "0" to at least 4 characters.
"""
from typing import Optional

CODE_LENGTH = 4

_GROUPS = {
    "bfpv": "1",
    "cgjkqsxz": "2",
    "dt": "3",
    "l": "4",
    "mn": "5",
    "r": "6",
}

_CLASS_OF = {ch: digit for letters, digit in _GROUPS.items() for ch in letters}
_DROP = frozenset("aeiouyhw")


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def digit_class(ch: str) -> Optional[str]:
    """Numeral of the consonant group of *ch*, or None for anything else."""
    if not _is_ascii_letter(ch):
        return None
    return _CLASS_OF.get(ch.lower())


def is_drop(ch: str) -> bool:
    return _is_ascii_letter(ch) and ch.lower() in _DROP


def encode(text: str, full: bool = False) -> str:
    """
    Soundex code of *text*.

    Empty input gives "". Input without any alphanumeric character gives
    "0000". Non-ASCII seeds (e.g. CJK) are kept as they are.
    """
    if not text:
        return ""

    result: list[str] = []
    last: Optional[str] = None
    seeded = False

    for ch in text:
        if not seeded:
            if not ch.isalnum():
                continue
            seeded = True
            last = digit_class(ch)
            result.append(ch.upper() if ch.isascii() else ch)
        else:
            # drop letters and non-letters leave `last` alone
            if not _is_ascii_letter(ch) or ch.lower() in _DROP:
                continue
            score = _CLASS_OF[ch.lower()]
            if score == last:
                continue
            last = score
            result.append(score)

        if not full and len(result) == CODE_LENGTH:
            break

    if len(result) < CODE_LENGTH:
        result.extend("0" * (CODE_LENGTH - len(result)))
    return "".join(result)


def encode_full(text: str) -> str:
    """Soundex code of *text* without truncation."""
    return encode(text, full=True)


def sounds_equal(left: str, right: str, full: bool = False) -> bool:
    """True if both strings share the same Soundex code."""
    return encode(left, full) == encode(right, full)
