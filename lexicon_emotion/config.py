from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EngineConfig:
    model_version: str = 'v0.0.5-MaxLexicon'
    lexicon_path: str | None = None
    history_path: str = 'data/analysis_history.jsonl'
    emotions: List[str] = field(default_factory=lambda: [
            'joy',
            'anger',
            'sadness',
            'fear',
            'surprise',
        ])
    negators: List[str] = field(default_factory=lambda: [
            'not',
            "n't",
            'no',
            'never',
            'nothing',
            'barely',
            'hardly',
            'scarcely',
        ])
    interjections: Dict[str, str] = field(default_factory=lambda: {
            'wow': 'Positive',
            'yay': 'Positive',
            'yayyy': 'Positive',
            'yaay': 'Positive',
            'oh': 'Neutral',
            'ugh': 'Negative',
            'ughh': 'Negative',
            'shit': 'Negative',
            'damn': 'Negative',
            'crap': 'Negative',
            'oops': 'Neutral',
        })
    emotion_map: Dict[str, str] = field(default_factory=lambda: {
            'happy': 'joy',
            'joy': 'joy',
            'amazing': 'joy',
            'excellent': 'joy',
            'great': 'joy',
            'surprise': 'surprise',
            'surprised': 'surprise',
            'wow': 'surprise',
            'whoa': 'surprise',
            'oh': 'surprise',
            'sad': 'sadness',
            'sadness': 'sadness',
            'depressed': 'sadness',
            'disappoint': 'sadness',
            'disappointed': 'sadness',
            'disappointment': 'sadness',
            'sucks': 'sadness',
            'shit': 'sadness',
            'shitty': 'sadness',
            'angry': 'anger',
            'furious': 'anger',
            'hate': 'anger',
            'fear': 'fear',
            'scared': 'fear',
            'terrified': 'fear',
            'horrible': 'anger',
        })
    fuzzy_enabled: bool = True
    min_fuzzy_distance: int = 1
    fuzzy_length_divisor: int = 3
    emotion_fallback: bool = False
