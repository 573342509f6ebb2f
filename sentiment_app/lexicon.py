"""Knowledge base loading: word lexicon and emoji descriptions.

Both tables are tab separated text:

    lexicon:  word<TAB>mean valence<TAB>std dev<TAB>raw ratings
    emoji:    emoji<TAB>description

Only the first two columns are read. When no source is given the tables
bundled with the ``vaderSentiment`` distribution are used. Releases from
3.3.2 on add entries ("heart", "hearts", "flawed") that shift the published
scores, so the dependency stays below that release.
"""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from importlib import resources
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Tuple, TypeVar, Union

from .errors import LoadError

logger = logging.getLogger(__name__)

DATA_PACKAGE = "vaderSentiment"
LEXICON_FILE = "vader_lexicon.txt"
EMOJI_FILE = "emoji_utf8_lexicon.txt"

Source = Union[str, os.PathLike, Iterable[str], None]
T = TypeVar("T")


# =============================================================================
# Reading
# =============================================================================

def _read_bundled(filename: str) -> Tuple[str, List[str]]:
    name = f"{DATA_PACKAGE}/{filename}"
    try:
        ref = resources.files(DATA_PACKAGE).joinpath(filename)
        with ref.open("r", encoding="utf-8") as fh:
            return name, fh.read().split("\n")
    except (ModuleNotFoundError, OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Bundled table {name} is not available: {exc}") from exc


def _read_lines(source: Source, default_file: str) -> Tuple[str, List[str]]:
    """Return a display name and the raw lines of ``source``."""
    if source is None:
        return _read_bundled(default_file)

    if isinstance(source, (str, os.PathLike)):
        name = os.fspath(source)
        try:
            with open(name, encoding="utf-8") as fh:
                return name, fh.read().split("\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(f"Cannot read {name}: {exc}") from exc

    name = getattr(source, "name", "<stream>")
    try:
        return str(name), [line.rstrip("\r\n") for line in source]
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Cannot read {name}: {exc}") from exc


# =============================================================================
# Parsing
# =============================================================================

def _to_valence(value: str) -> float:
    measure = float(value)
    if not math.isfinite(measure):
        raise ValueError(f"non-finite valence {value!r}")
    return measure


def _to_description(value: str) -> str:
    if not value.strip():
        raise ValueError("empty description")
    return value


def _parse_table(
    name: str,
    lines: Iterable[str],
    convert: Callable[[str], T],
    strict: bool,
) -> Dict[str, T]:
    table: Dict[str, T] = {}
    skipped = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        fields = line.split("\t")
        try:
            if len(fields) < 2:
                raise ValueError("missing tab-separated field")
            table[fields[0]] = convert(fields[1])
        except ValueError as exc:
            if strict:
                raise LoadError(f"{name}:{lineno}: malformed line ({exc})") from exc
            skipped += 1
            logger.warning("Skipping malformed line %s:%d (%s)", name, lineno, exc)
    if skipped:
        logger.warning("Skipped %d malformed line(s) in %s", skipped, name)
    return table


def load_lexicon(source: Source = None, strict: bool = True) -> Dict[str, float]:
    """Load a word -> valence table."""
    name, lines = _read_lines(source, LEXICON_FILE)
    lexicon = _parse_table(name, lines, _to_valence, strict)
    logger.info("Loaded %d lexicon entries from %s", len(lexicon), name)
    return lexicon


def load_emojis(source: Source = None, strict: bool = True) -> Dict[str, str]:
    """Load an emoji -> description table."""
    name, lines = _read_lines(source, EMOJI_FILE)
    emojis = _parse_table(name, lines, _to_description, strict)
    logger.info("Loaded %d emoji descriptions from %s", len(emojis), name)
    return emojis


# =============================================================================
# Knowledge base
# =============================================================================

@dataclass(frozen=True, eq=False)
class KnowledgeBase:
    """Read-only lexicon and emoji tables shared by every scoring call."""

    lexicon: Mapping[str, float]
    emojis: Mapping[str, str]
    max_emoji_len: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lexicon", MappingProxyType(dict(self.lexicon)))
        object.__setattr__(self, "emojis", MappingProxyType(dict(self.emojis)))
        object.__setattr__(self, "max_emoji_len", max(map(len, self.emojis), default=0))

    @classmethod
    def load(
        cls,
        lexicon_source: Source = None,
        emoji_source: Source = None,
        strict: bool = True,
    ) -> "KnowledgeBase":
        return cls(
            lexicon=load_lexicon(lexicon_source, strict=strict),
            emojis=load_emojis(emoji_source, strict=strict),
        )
