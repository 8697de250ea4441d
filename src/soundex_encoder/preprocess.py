import regex as re

_WORD_RE = re.compile(r"[\p{L}\p{N}]+")


def split_words(s: str) -> list[str]:
    # letters and digits of any script; everything else separates words
    return _WORD_RE.findall(s or "")
