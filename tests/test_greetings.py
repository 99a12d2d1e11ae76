import pytest

from src.safety.greetings import (
    GREETING_REPLIES,
    GREETING_TOKENS,
    classify_greeting,
    is_greeting,
)
from src.safety.normalize import normalize


@pytest.mark.parametrize("token,lang", sorted(GREETING_TOKENS.items()))
def test_every_table_token_gets_a_reply_from_its_language(token, lang):
    reply = classify_greeting(token)
    assert reply in GREETING_REPLIES[lang]


@pytest.mark.parametrize("raw", ["Hi!", "HELLO", "hey!!!", "  yo ", "Sup?"])
def test_english_exact(raw):
    assert classify_greeting(normalize(raw)) in GREETING_REPLIES["en"]


@pytest.mark.parametrize("raw", ["hey bro", "hi there", "hello friend", "hiya mate"])
def test_loose_two_token_english(raw):
    assert classify_greeting(normalize(raw)) in GREETING_REPLIES["en"]


@pytest.mark.parametrize("raw,lang", [
    ("Kamusta!", "tl"),
    ("¡Hola!", "es"),
    ("안녕하세요", "ko"),
    ("你好", "zh"),
    ("नमस्ते", "hi"),
    ("สวัสดี", "th"),
])
def test_other_languages(raw, lang):
    assert classify_greeting(normalize(raw)) in GREETING_REPLIES[lang]


@pytest.mark.parametrize("raw", [
    "hi how are you today",
    "hello i need help with something",
    "tell me a joke",
    "",
    "history",
])
def test_not_greetings(raw):
    assert classify_greeting(normalize(raw)) is None
    assert not is_greeting(normalize(raw))


def test_chooser_is_injectable():
    picked = classify_greeting("hi", chooser=lambda options: options[-1])
    assert picked == GREETING_REPLIES["en"][-1]
