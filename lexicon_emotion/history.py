from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Optional
import pandas as pd
from .emotion import EMOTIONS
from .score import AnalysisResult


def append_record(
    path: str | Path,
    result: AnalysisResult,
    *,
    source: Optional[str] = None,
) -> Dict[str, Any]:
    if result.timestamp is None:
        result = result.stamped()
    row = result.to_dict()
    if source:
        row['source'] = str(source)
    p = Path(path)
    p.parent.mkdir(
        parents=True,
        exist_ok=True,
    )
    with p.open(
        'a',
        encoding='utf-8',
    ) as f:
        f.write(json.dumps(
                row,
                ensure_ascii=False,
            ) + '\n')
    return row


def read_history(
    path: str | Path,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Return the last ``limit`` records (all when ``limit`` is None or <= 0), oldest first.

    Missing files read as empty; blank and malformed lines are skipped.
    """
    p = Path(path)
    if not p.exists():
        return []
    rows: List[Dict[str, Any]] = []
    with p.open(
        'r',
        encoding='utf-8',
    ) as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(
                obj,
                dict,
            ):
                rows.append(obj)
    if limit is not None and 0 < int(limit) < len(rows):
        rows = rows[-int(limit):]
    return rows


def history_frame(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    records = []
    for r in rows:
        emotions = r.get('emotions') or {}
        rec = {
            'timestamp': r.get('timestamp'),
            'source': r.get('source'),
            'sentiment': r.get(
                'sentiment',
                'Neutral',
            ),
            'dominant_emotion': r.get('dominantEmotion'),
            'positive_score': float(r.get('positiveScore') or 0.0),
            'negative_score': float(r.get('negativeScore') or 0.0),
        }
        for emo in EMOTIONS:
            rec[f'emo_{emo}'] = float(emotions.get(
                    emo,
                    0.0,
                ) or 0.0)
        records.append(rec)
    columns = [
        'timestamp',
        'source',
        'sentiment',
        'dominant_emotion',
        'positive_score',
        'negative_score',
    ] + [f'emo_{emo}' for emo in EMOTIONS]
    return pd.DataFrame(
        records,
        columns=columns,
    )


def summarize_history(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    df = history_frame(rows)
    summary: Dict[str, Any] = {
        'n': int(len(df)),
        'sentiment_counts': {
            'Positive': 0,
            'Negative': 0,
            'Neutral': 0,
        },
        'mean_positive_score': 0.0,
        'mean_negative_score': 0.0,
        'mean_emotions': {emo: 0.0 for emo in EMOTIONS},
    }
    if df.empty:
        return summary
    for label, count in df['sentiment'].value_counts().items():
        summary['sentiment_counts'][str(label)] = int(count)
    summary['mean_positive_score'] = float(df['positive_score'].mean())
    summary['mean_negative_score'] = float(df['negative_score'].mean())
    summary['mean_emotions'] = {
        emo: float(df[f'emo_{emo}'].mean()) for emo in EMOTIONS
    }
    return summary
