from __future__ import annotations
from typing import Iterable, List, Sequence
from .text import alpha_only

DEFAULT_NEGATORS = frozenset({
        'not',
        "n't",
        'no',
        'never',
        'nothing',
        'barely',
        'hardly',
        'scarcely',
    })


def normalise_negators(negators: Iterable[str] | None) -> frozenset:
    if negators is None:
        return DEFAULT_NEGATORS
    if isinstance(
        negators,
        str,
    ):
        negators = [negators]
    return frozenset(
        str(n).strip().lower() for n in negators if n and str(n).strip()
    )


def is_negated(
    raw_tokens: Sequence[str],
    index: int,
    negators: frozenset = DEFAULT_NEGATORS,
) -> bool:
    # one-token lookback on the raw sequence, letters only, no repeat squeeze
    if index <= 0 or index > len(raw_tokens):
        return False
    previous = alpha_only(raw_tokens[index - 1] or '')
    return previous in negators


def negation_mask(
    raw_tokens: Sequence[str],
    negators: frozenset = DEFAULT_NEGATORS,
) -> List[bool]:
    return [
        is_negated(
            raw_tokens,
            i,
            negators,
        )
        for i in range(len(raw_tokens))
    ]
