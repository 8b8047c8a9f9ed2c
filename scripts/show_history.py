#!/usr/bin/env python3
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(
    0,
    str(_ROOT),
)
from lexicon_emotion.history import read_history, summarize_history
from lexicon_emotion.utils import load_config


def main() -> int:
    ap = argparse.ArgumentParser(description='show recent analysis history')
    ap.add_argument(
        '--config',
        type=str,
        default=None,
    )
    ap.add_argument(
        '--history',
        type=str,
        default=None,
    )
    ap.add_argument(
        '--limit',
        type=int,
        default=50,
    )
    ap.add_argument(
        '--summary',
        action='store_true',
    )
    opts = ap.parse_args()
    setup = load_config(opts.config)
    path = opts.history or setup.history_path
    rows = read_history(
        path,
        limit=opts.limit,
    )
    print(f'read {path}')
    if not rows:
        print('empty')
        return 0
    if opts.summary:
        print(json.dumps(
                summarize_history(rows),
                indent=2,
            ))
        return 0
    for row in reversed(rows):
        ts = row.get('timestamp') or ''
        src = row.get('source') or '-'
        print(
            f"{ts} {src} {row.get('sentiment', '-')} "
            f"{row.get('dominantEmotion', '-')} "
            f"P:{row.get('positiveScore', 0)} N:{row.get('negativeScore', 0)}"
        )
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
