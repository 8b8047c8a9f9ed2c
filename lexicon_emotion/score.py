from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional
from .config import EngineConfig
from .emotion import EMOTIONS, emotion_for
from .lexicon import Lexicon, NEGATIVE, NEUTRAL, POSITIVE
from .matcher import Matcher, TokenMatch
from .negation import is_negated, normalise_negators
from .text import alpha_only, collapse_repeats, tokenize


class EmptyInputError(ValueError):
    pass


@dataclass
class ScoreAccumulator:
    emotions: tuple = EMOTIONS
    positive_count: int = 0
    negative_count: int = 0
    emotion_counts: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        for emo in self.emotions:
            self.emotion_counts.setdefault(
                emo,
                0,
            )

    @property
    def total(self) -> int:
        return self.positive_count + self.negative_count

    def add(
        self,
        match: TokenMatch,
        negated: bool,
        emotion: Optional[str],
    ) -> None:
        # negation flips polarity only; the emotion is counted as matched
        if match.is_positive:
            if negated:
                self.negative_count += 1
            else:
                self.positive_count += 1
        elif match.is_negative:
            if negated:
                self.positive_count += 1
            else:
                self.negative_count += 1
        if emotion is not None and emotion in self.emotion_counts:
            self.emotion_counts[emotion] += 1


@dataclass(frozen=True)
class AnalysisResult:
    sentiment: str
    positive_score: float
    negative_score: float
    emotions: Mapping[str, float]
    dominant_emotion: str
    dominant_emotion_score: float
    model_version: str
    positive_count: int = 0
    negative_count: int = 0
    emotion_counts: Mapping[str, int] = field(default_factory=dict)
    timestamp: Optional[str] = None

    def stamped(
        self,
        ts: Optional[datetime] = None,
    ) -> 'AnalysisResult':
        ts = ts or datetime.now(timezone.utc)
        return replace(
            self,
            timestamp=ts.isoformat(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sentiment': self.sentiment,
            'modelVersion': self.model_version,
            'positiveScore': float(self.positive_score),
            'negativeScore': float(self.negative_score),
            'emotions': {
                k: float(v) for k, v in self.emotions.items()
            },
            'dominantEmotion': self.dominant_emotion,
            'dominantEmotionScore': float(self.dominant_emotion_score),
            'timestamp': self.timestamp,
        }


def _finalize(
    acc: ScoreAccumulator,
    *,
    model_version: str,
    emotion_fallback: bool = False,
) -> AnalysisResult:
    total = acc.total
    if total > 0:
        pos = acc.positive_count / total
        neg = acc.negative_count / total
        if acc.positive_count > acc.negative_count:
            sentiment = POSITIVE
        elif acc.negative_count > acc.positive_count:
            sentiment = NEGATIVE
        else:
            sentiment = NEUTRAL
    else:
        pos = 0.0
        neg = 0.0
        sentiment = NEUTRAL
    sum_emotions = sum(acc.emotion_counts.values())
    if sum_emotions > 0:
        emotions = {
            emo: acc.emotion_counts[emo] / sum_emotions
            for emo in acc.emotions
        }
    else:
        emotions = {emo: 0.0 for emo in acc.emotions}
        if emotion_fallback:
            if 'joy' in emotions:
                emotions['joy'] = pos
            if 'anger' in emotions:
                emotions['anger'] = neg
    if pos > neg:
        dominant = ('positive', pos)
    elif neg > pos:
        dominant = ('negative', neg)
    else:
        dominant = ('neutral', 1.0 - (pos + neg))
    return AnalysisResult(
        sentiment=sentiment,
        positive_score=pos,
        negative_score=neg,
        emotions=MappingProxyType(emotions),
        dominant_emotion=dominant[0],
        dominant_emotion_score=dominant[1],
        model_version=model_version,
        positive_count=acc.positive_count,
        negative_count=acc.negative_count,
        emotion_counts=MappingProxyType(dict(acc.emotion_counts)),
    )


class Analyzer:
    """Scores text against one lexicon with a fixed set of static tables.

    The lexicon and the negation, interjection and emotion tables are frozen
    at construction, so one instance can serve any number of concurrent
    calls; every call works on its own accumulator.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        cfg: Optional[EngineConfig] = None,
    ):
        cfg = cfg or EngineConfig()
        self.lexicon = lexicon
        self.model_version = str(cfg.model_version)
        self.emotions = tuple(cfg.emotions)
        self.negators = normalise_negators(cfg.negators)
        self.emotion_map = MappingProxyType({
                str(k).lower(): str(v)
                for k, v in (cfg.emotion_map or {}).items()
            })
        self.emotion_fallback = bool(cfg.emotion_fallback)
        self.matcher = Matcher(
            lexicon,
            {
                str(k).lower(): str(v)
                for k, v in (cfg.interjections or {}).items()
            },
            fuzzy_enabled=cfg.fuzzy_enabled,
            min_fuzzy_distance=cfg.min_fuzzy_distance,
            fuzzy_length_divisor=cfg.fuzzy_length_divisor,
        )

    def explain(
        self,
        text: str,
    ) -> List[Dict[str, Any]]:
        """Per-token trace of what the scorer decided, in token order."""
        if text is None or not str(text).strip():
            raise EmptyInputError('error: EmptyInputError')
        return [
            {k: v for k, v in step.items() if k != '_match'}
            for step in self._scan(str(text))
        ]

    def _scan(
        self,
        text: str,
    ):
        raw_tokens = tokenize(text)
        for i, token in enumerate(raw_tokens):
            negated = is_negated(
                raw_tokens,
                i,
                self.negators,
            )
            alpha = alpha_only(token)
            if not alpha:
                continue
            normalized = collapse_repeats(alpha)
            match = self.matcher.match(
                normalized,
                alpha,
            )
            if match is None:
                continue
            emotion = emotion_for(
                normalized,
                match.fuzzy_key,
                match.is_positive,
                match.is_negative,
                self.emotion_map,
            )
            yield {
                'index': i,
                'token': token,
                'normalized': normalized,
                'label': match.label,
                'how': match.how,
                'key': match.key,
                'distance': match.distance,
                'negated': negated,
                'emotion': emotion,
                '_match': match,
            }

    def analyze(
        self,
        text: str,
    ) -> AnalysisResult:
        if text is None or not str(text).strip():
            raise EmptyInputError('error: EmptyInputError')
        acc = ScoreAccumulator(emotions=self.emotions)
        for step in self._scan(str(text)):
            acc.add(
                step['_match'],
                step['negated'],
                step['emotion'],
            )
        return _finalize(
            acc,
            model_version=self.model_version,
            emotion_fallback=self.emotion_fallback,
        )


@lru_cache(maxsize=8)
def _default_analyzer(lexicon: Lexicon) -> Analyzer:
    return Analyzer(lexicon)


def analyze(
    text: str,
    lexicon: Lexicon,
    cfg: Optional[EngineConfig] = None,
) -> AnalysisResult:
    if cfg is None:
        return _default_analyzer(lexicon).analyze(text)
    return Analyzer(
        lexicon,
        cfg,
    ).analyze(text)
