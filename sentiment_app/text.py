"""Text preparation: emoji substitution, tokenization and case predicates."""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import List, Mapping, Tuple

_PUNCTUATION = string.punctuation


# =============================================================================
# Predicates
# =============================================================================

def is_all_caps(token: str) -> bool:
    """ALL CAPS emphasis: every cased character upper-case, e.g. "GREAT" or ":D"."""
    return len(token) > 1 and token.isupper()


def has_cap_contrast(tokens: List[str]) -> bool:
    """True if some, but not all, tokens are ALL CAPS."""
    shouted = sum(1 for t in tokens if is_all_caps(t))
    return 0 < shouted < len(tokens)


# =============================================================================
# Emoji substitution
# =============================================================================

def replace_emojis(text: str, emojis: Mapping[str, str], max_len: int) -> str:
    """Replace each emoji with its description, longest match first."""
    if not emojis or max_len <= 0:
        return text.strip()

    out: List[str] = []
    prev_space = True
    i = 0
    n = len(text)
    while i < n:
        description = None
        for size in range(min(max_len, n - i), 0, -1):
            description = emojis.get(text[i:i + size])
            if description is not None:
                break
        if description is not None:
            if not prev_space:
                out.append(" ")
            out.append(description)
            prev_space = False
            i += size
        else:
            ch = text[i]
            out.append(ch)
            prev_space = ch.isspace()
            i += 1
    return "".join(out).strip()


# =============================================================================
# Tokenization
# =============================================================================

def _strip_punc_if_word(token: str) -> str:
    # two or fewer characters left means it was an emoticon like ":)"
    stripped = token.strip(_PUNCTUATION)
    if len(stripped) <= 2:
        return token
    return stripped


def split_tokens(text: str) -> List[str]:
    return [_strip_punc_if_word(t) for t in text.split()]


@dataclass(frozen=True)
class TokenSequence:
    """Words and emoticons of one text, with a lower-cased view."""

    words: Tuple[str, ...]
    lower: Tuple[str, ...]
    cap_contrast: bool

    @classmethod
    def build(cls, prepared: str, original: str) -> "TokenSequence":
        words = split_tokens(prepared)
        return cls(
            words=tuple(words),
            lower=tuple(w.lower() for w in words),
            cap_contrast=has_cap_contrast(split_tokens(original)),
        )

    def __len__(self) -> int:
        return len(self.words)
