from __future__ import annotations
import json
import warnings
from pathlib import Path
from typing import Optional
from tqdm.auto import tqdm
from .corpus import iter_text_paths, read_text, split_paragraphs
from .lexicon import load_lexicon
from .score import Analyzer
from .utils import load_config


def score_txt_dir(
    *,
    input_dir: str,
    output_jsonl: str,
    cfg_path: Optional[str] = None,
    lexicon_path: Optional[str] = None,
    recursive: bool = True,
    limit: Optional[int] = None,
    per_paragraph: bool = False,
) -> dict:
    setup = load_config(cfg_path)
    lexicon = load_lexicon(lexicon_path or setup.lexicon_path)
    if lexicon.degraded:
        warnings.warn(
            'warn: lexicon degraded',
            RuntimeWarning,
            stacklevel=2,
        )
    analyzer = Analyzer(
        lexicon,
        setup,
    )
    paths = list(iter_text_paths(
            input_dir,
            recursive=recursive,
            suffix='.txt',
        ))
    if limit is not None:
        paths = paths[: max(
            0,
            int(limit),
        )]
    out_path = Path(output_jsonl)
    out_path.parent.mkdir(
        parents=True,
        exist_ok=True,
    )
    stats = {
        'docs': len(paths),
        'written': 0,
        'skipped_empty': 0,
    }
    with out_path.open(
        'w',
        encoding='utf-8',
    ) as out_f:
        for p in tqdm(
            paths,
            desc='score_lexicon',
        ):
            text = read_text(p)
            if not text.strip():
                stats['skipped_empty'] += 1
                continue
            row = analyzer.analyze(text).stamped().to_dict()
            row['meta'] = {'path': str(p)}
            if per_paragraph:
                row['paragraphs'] = [
                    analyzer.analyze(para).to_dict()
                    for para in split_paragraphs(text)
                ]
            out_f.write(json.dumps(
                    row,
                    ensure_ascii=False,
                ) + '\n')
            stats['written'] += 1
    return stats
