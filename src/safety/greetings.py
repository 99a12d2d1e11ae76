# =============================================================
# greetings.py
# -------------------------------------------------------------
# Tiny greetings answered with a canned line, no model call.
# Tables are keyed by language; tokens are normalized once at
# import so lookups compare canonical forms on both sides.
# =============================================================

from __future__ import annotations
import random
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from .normalize import normalize

Chooser = Callable[[Sequence[str]], str]

# language -> (greeting tokens, reply variants)
_GREETINGS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "en": (
        ("hi", "hello", "hey", "yo", "sup", "hiya", "howdy", "heya",
         "hey there", "hi there", "hello there", "good morning",
         "good afternoon", "good evening", "whats up", "what's up"),
        ("Hey!", "Hi!", "Yo!", "Sup!", "Hey there!"),
    ),
    "tl": (
        ("kamusta", "kumusta", "musta", "kamusta ka", "kumusta ka",
         "magandang umaga", "magandang hapon", "magandang gabi"),
        ("Kamusta!", "Oks naman! Ikaw?", "Okay naman. Ikaw?"),
    ),
    "es": (
        ("hola", "buenas", "buenos días", "buenas tardes", "buenas noches", "qué tal"),
        ("¡Hola!", "¿Qué tal?", "¡Buenas!"),
    ),
    "ko": (
        ("안녕", "안녕하세요", "하이"),
        ("안녕!", "반가워!", "안녕하세요!", "반가워요!"),
    ),
    "zh": (
        ("你好", "您好", "嗨", "哈喽", "早上好"),
        ("你好!", "嗨!", "最近怎么样？"),
    ),
    "hi": (
        ("नमस्ते", "नमस्कार", "namaste"),
        ("नमस्ते!", "कैसे हो?"),
    ),
    "th": (
        ("สวัสดี", "สวัสดีครับ", "สวัสดีค่ะ", "หวัดดี"),
        ("สวัสดี!", "เป็นไงบ้าง?"),
    ),
}

# first tokens that make a two-word message an English greeting ("hey bro")
LOOSE_ENGLISH = frozenset({"hi", "hello", "hey", "yo", "sup", "hiya"})

GREETING_REPLIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {lang: replies for lang, (_, replies) in _GREETINGS.items()}
)

GREETING_TOKENS: Mapping[str, str] = MappingProxyType(
    {normalize(tok): lang for lang, (tokens, _) in _GREETINGS.items() for tok in tokens}
)


def greeting_language(normalized_text: str) -> Optional[str]:
    """Language tag of a greeting, or None when the text is not one."""
    if not normalized_text:
        return None
    lang = GREETING_TOKENS.get(normalized_text)
    if lang:
        return lang
    parts = normalized_text.split()
    if len(parts) <= 2 and parts[0] in LOOSE_ENGLISH:
        return "en"
    return None


def is_greeting(normalized_text: str) -> bool:
    return greeting_language(normalized_text) is not None


def classify_greeting(normalized_text: str, chooser: Chooser = random.choice) -> Optional[str]:
    lang = greeting_language(normalized_text)
    if lang is None:
        return None
    return chooser(GREETING_REPLIES[lang])
