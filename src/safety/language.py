# =============================================================
# language.py
# -------------------------------------------------------------
# Heuristic language guess, used as a prompt hint and a log
# field. Not authoritative: script ranges for non-Latin text,
# small stopword sets for English / Filipino / Spanish.
# =============================================================

from __future__ import annotations
from enum import Enum
from typing import Set

from .normalize import fold


class Language(str, Enum):
    ENGLISH = "en"
    FILIPINO = "tl"
    SPANISH = "es"
    KOREAN = "ko"
    CHINESE = "zh"
    HINDI = "hi"
    THAI = "th"
    MIXED = "mixed"
    UNKNOWN = "unknown"


_SCRIPTS = (
    (Language.KOREAN, ((0x1100, 0x11FF), (0x3130, 0x318F), (0xAC00, 0xD7AF))),
    (Language.CHINESE, ((0x4E00, 0x9FFF), (0x3400, 0x4DBF))),
    (Language.HINDI, ((0x0900, 0x097F),)),
    (Language.THAI, ((0x0E00, 0x0E7F),)),
)

_STOPWORDS = {
    Language.ENGLISH: frozenset({
        "the", "and", "is", "are", "i", "you", "my", "me", "it", "to", "what",
        "how", "this", "that", "im", "dont", "feel", "just", "with", "so",
    }),
    Language.FILIPINO: frozenset({
        "ako", "ikaw", "ka", "ko", "mo", "ang", "ng", "mga", "sa", "naman",
        "lang", "po", "hindi", "di", "na", "kasi", "talaga", "siya", "ba", "yung",
    }),
    Language.SPANISH: frozenset({
        "el", "la", "los", "las", "que", "es", "yo", "tu", "muy", "pero",
        "estoy", "por", "para", "como", "una", "un", "con", "mi", "qué", "no",
    }),
}

# a Latin language needs this many stopword hits to count
_MIN_HITS = 2


def _scripts_in(text: str) -> Set[Language]:
    found: Set[Language] = set()
    for ch in text:
        cp = ord(ch)
        for lang, ranges in _SCRIPTS:
            if any(lo <= cp <= hi for lo, hi in ranges):
                found.add(lang)
    return found


def detect_language(text: str) -> Language:
    t = fold(text)
    if not t:
        return Language.UNKNOWN

    found = _scripts_in(t)
    latin = [w for w in t.split() if any("a" <= c <= "z" for c in w)]
    if latin:
        hits = {lang: sum(1 for w in latin if w in sw) for lang, sw in _STOPWORDS.items()}
        strong = {lang for lang, n in hits.items() if n >= _MIN_HITS}
        if strong:
            found |= strong
        else:
            # short text: a single clear leader still counts
            best = max(hits.values())
            leaders = [lang for lang, n in hits.items() if n == best]
            if best and len(leaders) == 1:
                found.add(leaders[0])

    if not found:
        return Language.UNKNOWN
    if len(found) > 1:
        return Language.MIXED
    return next(iter(found))
