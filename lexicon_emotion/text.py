from __future__ import annotations
import re
from typing import List

_SPLIT_RE = re.compile("[^\\w']+|_")
_NON_ALPHA_RE = re.compile('[^a-z]')
_REPEAT_RE = re.compile('(.)\\1{2,}')


def tokenize(text: str) -> List[str]:
    if not text:
        return []
    return [
        tok for tok in _SPLIT_RE.split(text.lower()) if tok
    ]


def alpha_only(token: str) -> str:
    if not token:
        return ''
    return _NON_ALPHA_RE.sub(
        '',
        token.lower(),
    )


def collapse_repeats(token: str) -> str:
    return _REPEAT_RE.sub(
        '\\1\\1',
        token,
    )


def normalize_token(token: str) -> str:
    """Lowercase, keep only a-z, and squeeze runs of 3+ identical letters to 2.

    "Soooo!!" -> "soo", "yayyy" -> "yayy". Tokens without letters come back
    as '' and are skipped by the scorer.
    """
    alpha = alpha_only(token)
    if not alpha:
        return alpha
    return collapse_repeats(alpha)
