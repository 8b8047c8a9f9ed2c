from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
from rapidfuzz.distance import Levenshtein
from .lexicon import Lexicon, NEGATIVE, POSITIVE
from .text import alpha_only

DIRECT = 'direct'
INTERJECTION = 'interjection'
FUZZY = 'fuzzy'


def _same_label(
    label: Optional[str],
    expected: str,
) -> bool:
    return label is not None and label.lower() == expected.lower()


@dataclass(frozen=True)
class TokenMatch:
    label: str
    how: str
    key: Optional[str] = None
    distance: int = 0

    @property
    def is_positive(self) -> bool:
        return _same_label(
            self.label,
            POSITIVE,
        )

    @property
    def is_negative(self) -> bool:
        return _same_label(
            self.label,
            NEGATIVE,
        )

    @property
    def fuzzy_key(self) -> Optional[str]:
        return self.key if self.how == FUZZY else None


def levenshtein(
    a: str,
    b: str,
    max_distance: Optional[int] = None,
) -> int:
    # unit-cost insert/delete/substitute; past max_distance returns max_distance + 1
    return Levenshtein.distance(
        a,
        b,
        score_cutoff=max_distance,
    )


def fuzzy_threshold(
    token: str,
    *,
    min_distance: int = 1,
    length_divisor: int = 3,
) -> int:
    return max(
        int(min_distance),
        len(token) // max(
            1,
            int(length_divisor),
        ),
    )


class FuzzyIndex:
    """Lexicon keys reduced to letters and bucketed by length.

    A key whose length differs from the candidate by more than the accepted
    distance can never be accepted, so only nearby buckets are scanned.
    Distance ties go to the lexically smallest lexicon key, as written.
    """

    def __init__(
        self,
        lexicon: Lexicon,
    ):
        buckets: Dict[int, List[Tuple[str, str]]] = defaultdict(list)
        for key in sorted(
            w for w, _ in lexicon.items()
        ):
            if not key:
                continue
            norm = alpha_only(key)
            if not norm:
                continue
            buckets[len(norm)].append((key, norm))
        self._buckets = dict(buckets)

    def __len__(self) -> int:
        return sum(len(v) for v in self._buckets.values())

    def nearest(
        self,
        candidate: str,
        max_distance: int,
    ) -> Optional[Tuple[str, int]]:
        if not candidate or not self._buckets:
            return None
        n = len(candidate)
        best: Optional[Tuple[int, str]] = None
        for length in range(
            max(
                1,
                n - max_distance,
            ),
            n + max_distance + 1,
        ):
            for key, norm in self._buckets.get(
                length,
                (),
            ):
                dist = levenshtein(
                    candidate,
                    norm,
                    max_distance,
                )
                if best is None or (dist, key) < best:
                    best = (dist, key)
        if best is None or best[0] > max_distance:
            return None
        return (best[1], best[0])


class Matcher:
    def __init__(
        self,
        lexicon: Lexicon,
        interjections: Optional[Mapping[str, str]] = None,
        *,
        fuzzy_enabled: bool = True,
        min_fuzzy_distance: int = 1,
        fuzzy_length_divisor: int = 3,
    ):
        self.lexicon = lexicon
        self.interjections = MappingProxyType(dict(interjections or {}))
        self.fuzzy_enabled = bool(fuzzy_enabled)
        self.min_fuzzy_distance = int(min_fuzzy_distance)
        self.fuzzy_length_divisor = int(fuzzy_length_divisor)
        self._index = FuzzyIndex(lexicon) if self.fuzzy_enabled else None

    def direct(
        self,
        normalized: str,
        alpha: str,
    ) -> Optional[TokenMatch]:
        lex = self.lexicon
        if lex.is_positive(alpha) or lex.is_positive(normalized):
            return TokenMatch(
                POSITIVE,
                DIRECT,
                alpha if lex.is_positive(alpha) else normalized,
            )
        if lex.is_negative(alpha) or lex.is_negative(normalized):
            return TokenMatch(
                NEGATIVE,
                DIRECT,
                alpha if lex.is_negative(alpha) else normalized,
            )
        return None

    def interjection(
        self,
        normalized: str,
    ) -> Optional[TokenMatch]:
        label = self.interjections.get(normalized)
        if label is None:
            return None
        return TokenMatch(
            label,
            INTERJECTION,
            normalized,
        )

    def fuzzy(
        self,
        normalized: str,
    ) -> Optional[TokenMatch]:
        if self._index is None or not normalized:
            return None
        limit = fuzzy_threshold(
            normalized,
            min_distance=self.min_fuzzy_distance,
            length_divisor=self.fuzzy_length_divisor,
        )
        hit = self._index.nearest(
            normalized,
            limit,
        )
        if hit is None:
            return None
        (
            key,
            dist,
        ) = hit
        return TokenMatch(
            self.lexicon.label_of(key),
            FUZZY,
            key,
            dist,
        )

    def match(
        self,
        normalized: str,
        alpha: Optional[str] = None,
    ) -> Optional[TokenMatch]:
        if not normalized:
            return None
        alpha = normalized if alpha is None else alpha
        return (
            self.direct(
                normalized,
                alpha,
            )
            or self.interjection(normalized)
            or self.fuzzy(normalized)
        )
