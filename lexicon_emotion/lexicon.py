from __future__ import annotations
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

POSITIVE = 'Positive'
NEGATIVE = 'Negative'
NEUTRAL = 'Neutral'

ENTRY_SEP = ';'
FIELD_SEP = ':'


def _default_resource_path() -> Path:
    return Path(__file__).resolve().parent / 'resources' / 'sentiment_model.txt'


class Lexicon:
    """Read-only word -> polarity label mapping.

    Built once and shared by every analysis. ``positive`` and ``negative``
    are derived from the mapping at construction; ``degraded`` marks a
    lexicon built from a missing or unreadable resource.
    """

    __slots__ = (
        '_labels',
        '_positive',
        '_negative',
        '_degraded',
    )

    def __init__(
        self,
        entries: Optional[Mapping[str, str]] = None,
        *,
        degraded: bool = False,
    ):
        labels: Dict[str, str] = dict(entries or {})
        self._labels = MappingProxyType(labels)
        self._positive = frozenset(
            w for w, lab in labels.items() if lab == POSITIVE
        )
        self._negative = frozenset(
            w for w, lab in labels.items() if lab == NEGATIVE
        )
        self._degraded = bool(degraded)

    @classmethod
    def empty(cls) -> 'Lexicon':
        return cls(
            {},
            degraded=True,
        )

    @property
    def labels(self) -> Mapping[str, str]:
        return self._labels

    @property
    def positive(self) -> frozenset:
        return self._positive

    @property
    def negative(self) -> frozenset:
        return self._negative

    @property
    def degraded(self) -> bool:
        return self._degraded

    def is_positive(self, word: str) -> bool:
        return word in self._positive

    def is_negative(self, word: str) -> bool:
        return word in self._negative

    def label_of(self, word: str) -> Optional[str]:
        return self._labels.get(word)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._labels.items())

    def __contains__(self, word) -> bool:
        return word in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return (
            f'Lexicon(words={len(self._labels)}, '
            f'positive={len(self._positive)}, '
            f'negative={len(self._negative)}, '
            f'degraded={self._degraded})'
        )


def parse_entries(text: str) -> Dict[str, str]:
    # later duplicates overwrite earlier ones
    entries: Dict[str, str] = {}
    if not text:
        return entries
    for raw in text.split(ENTRY_SEP):
        if not raw.strip():
            continue
        parts = raw.split(FIELD_SEP)
        if len(parts) != 2:
            continue
        word = parts[0].strip()
        label = parts[1].strip()
        entries[word] = label
    return entries


def parse_lexicon(text: Optional[str]) -> Lexicon:
    """Build a Lexicon from resource text of ``word:Label`` entries joined by ``;``.

    ``None`` stands for an absent resource. Absent text, or text with no
    well-formed entry, gives an empty lexicon flagged ``degraded``.
    """
    if text is None:
        return Lexicon.empty()
    entries = parse_entries(text)
    return Lexicon(
        entries,
        degraded=not entries,
    )


def _is_resource_text(source: str) -> bool:
    if not (ENTRY_SEP in source or FIELD_SEP in source or '\n' in source):
        return False
    try:
        return not Path(source).is_file()
    except (OSError, ValueError):
        return True


def load_lexicon(source: str | bytes | Path | None = None) -> Lexicon:
    """Build a Lexicon from resource text, a file path, or the packaged default.

    A ``str`` holding ``;``, ``:`` or a newline that is not an existing file
    is parsed as resource text, and ``bytes`` are decoded as UTF-8. Any other
    ``str`` or ``Path`` is read from disk, and ``None`` means the packaged
    resource. Never raises: a missing or unreadable source yields
    ``Lexicon.empty()``, so callers should check ``degraded`` and report it.
    """
    if isinstance(
        source,
        bytes,
    ):
        try:
            return parse_lexicon(source.decode('utf-8'))
        except UnicodeDecodeError:
            return Lexicon.empty()
    if isinstance(
        source,
        str,
    ) and _is_resource_text(source):
        return parse_lexicon(source)
    p = Path(source) if source else _default_resource_path()
    try:
        text = p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError, ValueError):
        return Lexicon.empty()
    return parse_lexicon(text)
