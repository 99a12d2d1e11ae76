# =============================================================
# crisis.py
# -------------------------------------------------------------
# Lexical self-harm gate. Best effort, not a risk assessment.
#
# Order of checks on the folded text (see normalize.fold):
#   1. first-person negation  -> not crisis
#   2. explicit phrase        -> crisis
#   3. ambiguous word (die / dead / kill) together with a
#      first-person context marker -> crisis
# =============================================================

from __future__ import annotations
import re
from typing import Any, Iterable, List, Optional

from .normalize import fold

NEGATIONS = [
    r"\b(?:im|i am) not suicidal\b",
    r"\bnot suicidal\b",
    r"\bno longer suicidal\b",
    r"\b(?:wont|will not|would never|wouldnt|would not|never|not going to|not gonna) (?:kill|hurt|harm) myself\b",
    r"\b(?:dont|do not) want to (?:kill|hurt|harm) myself\b",
    r"\bnot (?:thinking|thinking about|thinking of) (?:suicide|killing myself|ending my life)\b",
    r"\b(?:wont|will not|not going to|never) end my life\b",
]

EXPLICIT = [
    r"\bkill(?:ing)? myself\b",
    r"\bend(?:ing)? my (?:own )?life\b",
    r"\btake my (?:own )?life\b",
    r"\bi (?:want|wanna|need) to die\b",
    r"\bi wanna die\b",
    r"\bi (?:dont|do not) want to (?:live|be alive|exist)\b",
    r"\bi will (?:kill|hurt|harm) myself\b",
    r"\bharm(?:ing)? myself\b",
    r"\bself ?harm",
    r"\bsuicid(?:e|al)\b",
    r"\boverdos(?:e|ed|ing)\b",
    r"\bcut(?:ting)? myself\b",
    r"\bhang(?:ing)? myself\b",
    r"\bbetter off dead\b",
    r"\bno reason to live\b",
    # Filipino
    r"\bmagpakamatay\b",
    r"\bgusto ko (?:nang|ng) mamatay\b",
    r"\bayoko (?:nang|na) mabuhay\b",
]

AMBIGUOUS = frozenset({"die", "dead", "kill"})

CONTEXT_MARKERS = [
    r"\bmyself\b",
    r"\bmy life\b",
    r"\bi will\b",
    r"\bill\b",
    r"\b(?:im|i am) going to\b",
    r"\bgonna\b",
    r"\bwant to\b",
    r"\bwanna\b",
    r"\bi wish i (?:was|were)\b",
]

# idioms that use an ambiguous word harmlessly; removed before the context tier
BENIGN_IDIOMS = [
    r"\bkill(?:ing)? it\b",
    r"\bdead (?:serious|tired|on|set|end|wrong|last)\b",
    r"\bdie laughing\b",
    r"\bdying of laughter\b",
]

_NEGATION_RE = re.compile("|".join(NEGATIONS))
_EXPLICIT_RE = re.compile("|".join(EXPLICIT))
_CONTEXT_RE = re.compile("|".join(CONTEXT_MARKERS))
_BENIGN_RE = re.compile("|".join(BENIGN_IDIOMS))

CRISIS_REPLIES = {
    "PH": "\n".join([
        "I’m really sorry you’re feeling this way. I can’t help with self-harm, but you don’t have to go through this alone.",
        "",
        "If you might be in immediate danger, please call 911 right now (Philippines) or go to the nearest ER.",
        "You can also contact the National Center for Mental Health (NCMH) Crisis Hotline (24/7): 1553 (landline) or 0917-899-8727 / 0966-351-4518 / 0919-057-1553.",
        "",
        "If there’s someone you trust nearby, please reach out to them now and tell them you need support.",
    ]),
    "US": "\n".join([
        "I’m really sorry you’re feeling this way. I can’t help with self-harm, but you don’t have to go through this alone.",
        "",
        "If you might be in immediate danger, please call 911 right now or go to the nearest ER.",
        "You can also call or text 988 (Suicide & Crisis Lifeline, 24/7).",
        "",
        "If there’s someone you trust nearby, please reach out to them now and tell them you need support.",
    ]),
    "DEFAULT": "\n".join([
        "I’m really sorry you’re feeling this way. I can’t help with self-harm, but you don’t have to go through this alone.",
        "",
        "If you might be in immediate danger, please call your local emergency number right now or go to the nearest ER.",
        "A local crisis hotline can also talk with you any time of day.",
        "",
        "If there’s someone you trust nearby, please reach out to them now and tell them you need support.",
    ]),
}


def crisis_reply(region: str = "PH") -> str:
    """Safety redirect for a region; unknown regions get the generic text."""
    return CRISIS_REPLIES.get((region or "").upper(), CRISIS_REPLIES["DEFAULT"])


def classify_crisis(text: str) -> bool:
    t = fold(text)
    if not t:
        return False
    if _NEGATION_RE.search(t):
        return False
    if _EXPLICIT_RE.search(t):
        return True

    t = _BENIGN_RE.sub(" ", t)
    if not AMBIGUOUS.intersection(t.split()):
        return False
    return bool(_CONTEXT_RE.search(t))


def user_turns(history: Iterable[Any]) -> List[str]:
    """Content of user-authored turns, role labels dropped."""
    return [m.content for m in history if m.role == "user"]


def history_signals_crisis(history: Optional[Iterable[Any]], window: int = 10) -> bool:
    """Crisis check over the user turns among the last `window` valid entries.

    Positive when the joined turns trip the classifier, or any single turn
    does; the per-turn pass keeps a negation in one turn from masking
    another.
    """
    from src.generate.context import recent_turns

    texts = user_turns(recent_turns(history, window))
    if not texts:
        return False
    return classify_crisis("\n".join(texts)) or any(classify_crisis(t) for t in texts)
