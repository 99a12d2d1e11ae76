# Pre-model gate: greetings and crisis language.
# Exposes the classifiers and a single `classify` entry point.

import random
from typing import Any, Iterable, Optional

from .normalize import normalize, fold
from .greetings import classify_greeting, is_greeting, Chooser
from .crisis import classify_crisis, history_signals_crisis, crisis_reply
from .language import Language, detect_language
from .types import Verdict


def classify(message: str, history: Optional[Iterable[Any]] = None, chooser: Chooser = random.choice,
             region: str = "PH", window: int = 10) -> Verdict:
    """Greeting first, then crisis on the message, then on recent user turns."""
    canned = classify_greeting(normalize(message), chooser)
    if canned is not None:
        return Verdict.greeting(canned)
    if classify_crisis(message) or history_signals_crisis(history, window):
        return Verdict.crisis(crisis_reply(region))
    return Verdict.passthrough()


__all__ = [
    "normalize", "fold", "classify_greeting", "is_greeting", "classify_crisis",
    "history_signals_crisis", "crisis_reply", "Language", "detect_language",
    "Verdict", "classify",
]
