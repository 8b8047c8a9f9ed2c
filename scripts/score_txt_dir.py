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
from lexicon_emotion.batch import score_txt_dir


def main() -> int:
    ap = argparse.ArgumentParser(description='score a directory of txt files')
    ap.add_argument(
        '--input_dir',
        type=str,
        required=True,
    )
    ap.add_argument(
        '--output_jsonl',
        type=str,
        required=True,
    )
    ap.add_argument(
        '--config',
        type=str,
        default=None,
    )
    ap.add_argument(
        '--lexicon',
        type=str,
        default=None,
    )
    ap.add_argument(
        '--limit',
        type=int,
        default=None,
    )
    ap.add_argument(
        '--no_recursive',
        action='store_true',
    )
    ap.add_argument(
        '--per_paragraph',
        action='store_true',
    )
    opts = ap.parse_args()
    stats = score_txt_dir(
        input_dir=opts.input_dir,
        output_jsonl=opts.output_jsonl,
        cfg_path=opts.config,
        lexicon_path=opts.lexicon,
        recursive=not opts.no_recursive,
        limit=opts.limit,
        per_paragraph=opts.per_paragraph,
    )
    print(json.dumps(
            stats,
            indent=2,
        ))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
