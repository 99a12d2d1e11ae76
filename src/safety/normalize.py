# =============================================================
# normalize.py
# -------------------------------------------------------------
# Canonical form of user text for greeting / crisis matching:
# - NFC compose, casefold
# - Drop punctuation, symbols and emoji (any script)
# - Keep letters, combining marks, numbers, spaces, apostrophe
# - Collapse whitespace
# =============================================================

from __future__ import annotations
import re
import unicodedata

_WS = re.compile(r"\s+")
# typographic apostrophes folded to ASCII before filtering
_APOSTROPHES = str.maketrans({"’": "'", "ʼ": "'", "‘": "'"})
_KEEP_CATEGORIES = ("L", "M", "N")


def _keep(ch: str) -> bool:
    if ch == "'" or ch.isspace():
        return True
    return unicodedata.category(ch)[0] in _KEEP_CATEGORIES


def normalize(raw: str) -> str:
    s = str(raw or "").translate(_APOSTROPHES)
    s = unicodedata.normalize("NFC", s)
    s = s.casefold()
    s = "".join(ch for ch in s if _keep(ch))
    s = _WS.sub(" ", s).strip()
    # filtering can leave a base char next to a mark it never composed with
    return unicodedata.normalize("NFC", s)


def fold(raw: str) -> str:
    """Matching form for the crisis gate: "don't" == "dont", and
    punctuation becomes a space so "suicidal/hopeless" stays two words."""
    s = str(raw or "").translate(_APOSTROPHES)
    s = unicodedata.normalize("NFC", s).casefold()
    s = "".join(ch if _keep(ch) else " " for ch in s).replace("'", "")
    s = _WS.sub(" ", s).strip()
    return unicodedata.normalize("NFC", s)
