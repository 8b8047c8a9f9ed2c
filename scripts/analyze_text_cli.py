#!/usr/bin/env python3
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(
    0,
    str(_ROOT),
)
from lexicon_emotion.history import append_record
from lexicon_emotion.lexicon import load_lexicon
from lexicon_emotion.score import Analyzer, EmptyInputError
from lexicon_emotion.utils import load_config


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description='score text with the keyword lexicon')
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument(
        '--text',
        type=str,
        default=None,
    )
    src.add_argument(
        '--file',
        type=str,
        default=None,
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
        '--explain',
        action='store_true',
    )
    ap.add_argument(
        '--record',
        action='store_true',
        help='append the result to the history file',
    )
    ap.add_argument(
        '--history',
        type=str,
        default=None,
    )
    opts = ap.parse_args(argv)
    setup = load_config(opts.config)
    lexicon = load_lexicon(opts.lexicon or setup.lexicon_path)
    if lexicon.degraded:
        print(
            'warn: lexicon degraded, every score will be neutral',
            file=sys.stderr,
        )
    analyzer = Analyzer(
        lexicon,
        setup,
    )
    if opts.file:
        text = Path(opts.file).read_text(
            encoding='utf-8',
            errors='ignore',
        )
        source = opts.file
    else:
        text = opts.text
        source = 'text'
    try:
        result = analyzer.analyze(text).stamped()
    except EmptyInputError:
        print(
            'error: input text cannot be empty',
            file=sys.stderr,
        )
        return 2
    out = result.to_dict()
    if opts.explain:
        out['tokens'] = analyzer.explain(text)
    print(json.dumps(
            out,
            indent=2,
            ensure_ascii=False,
        ))
    if opts.record:
        history_path = opts.history or setup.history_path
        append_record(
            history_path,
            result,
            source=source,
        )
        print(
            f'saved: {history_path}',
            file=sys.stderr,
        )
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
