from __future__ import annotations
from typing import Mapping, Optional
from .text import alpha_only

EMOTIONS = (
    'joy',
    'anger',
    'sadness',
    'fear',
    'surprise',
)
POSITIVE_FALLBACK = 'joy'
NEGATIVE_FALLBACK = 'anger'


def emotion_for(
    normalized: str,
    fuzzy_key: Optional[str],
    is_positive: bool,
    is_negative: bool,
    emotion_map: Mapping[str, str],
) -> Optional[str]:
    label = emotion_map.get(normalized)
    if label is not None:
        return label
    if fuzzy_key:
        label = emotion_map.get(alpha_only(fuzzy_key))
        if label is not None:
            return label
    if is_positive:
        return POSITIVE_FALLBACK
    if is_negative:
        return NEGATIVE_FALLBACK
    return None
