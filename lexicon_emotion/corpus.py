from __future__ import annotations
import re
from pathlib import Path
from typing import Iterator, List

_PARA_SPLIT_RE = re.compile('\\n\\s*\\n+')


def iter_text_paths(
    input_path: str | Path,
    *,
    recursive: bool = True,
    suffix: str = '.txt',
) -> Iterator[Path]:
    """Yield `input_path` itself when it is a file, else its `suffix` files in sorted order."""
    root = Path(input_path)
    if root.is_file():
        yield root
        return
    if not root.is_dir():
        raise FileNotFoundError('error: FileNotFoundError')
    found = root.rglob('*') if recursive else root.iterdir()
    wanted = suffix.lower()
    yield from sorted(
        p for p in found if p.is_file() and p.suffix.lower() == wanted
    )


def read_text(path: Path) -> str:
    return Path(path).read_text(
        encoding='utf-8',
        errors='ignore',
    )


def split_paragraphs(text: str) -> List[str]:
    if not text:
        return []
    return [
        p.strip()
        for p in _PARA_SPLIT_RE.split(text)
        if p.strip()
    ]
