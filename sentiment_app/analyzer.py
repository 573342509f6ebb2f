"""Rule-based sentiment intensity scoring.

Public API:
    SentimentIntensityAnalyzer(lexicon_source, emoji_source).score(text) -> Sentiment
    SentimentIntensityAnalyzer.explain(text) -> Dict[str, Any]  # debug-friendly trace

Every sentiment word found in the lexicon starts from its mean valence and is
then adjusted by its neighbours: "no" and other negations within three tokens,
booster or dampener words within three tokens (decayed with distance), ALL
CAPS emphasis, a handful of idioms and the "at least" construction. A "but"
shifts weight to the clause that follows it, and "!" / "?" push the final
score away from zero.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from . import aggregate
from .constants import (
    BOOSTER_DICT,
    C_INCR,
    N_SCALAR,
    SPECIAL_CASES,
    WINDOW_DECAY,
    negated,
)
from .errors import InvalidTextError
from .lexicon import KnowledgeBase, Source
from .text import TokenSequence, is_all_caps, replace_emojis

logger = logging.getLogger(__name__)


# =============================================================================
# Data model
# =============================================================================

@dataclass
class Sentiment:
    negative: float = 0.0
    neutral: float = 0.0
    positive: float = 0.0
    compound: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


# =============================================================================
# Window helpers
# =============================================================================

def scalar_inc_dec(word: str, word_lower: str, valence: float, cap_contrast: bool) -> float:
    """Increment contributed by a booster/dampener preceding a sentiment word."""
    scalar = BOOSTER_DICT.get(word_lower, 0.0)
    if not scalar:
        return 0.0
    if valence < 0:
        scalar *= -1
    if is_all_caps(word) and cap_contrast:
        if valence > 0:
            scalar += C_INCR
        else:
            scalar -= C_INCR
    return scalar


def _negation_check(valence: float, lower: Tuple[str, ...], start_i: int, i: int) -> float:
    if start_i == 0:
        if negated([lower[i - 1]]):
            valence *= N_SCALAR
    elif start_i == 1:
        if lower[i - 2] == "never" and lower[i - 1] in ("so", "this"):
            valence *= 1.25
        elif lower[i - 2] == "without" and lower[i - 1] == "doubt":
            pass
        elif negated([lower[i - 2]]):
            valence *= N_SCALAR
    elif start_i == 2:
        if (lower[i - 3] == "never" and lower[i - 2] in ("so", "this")) or lower[i - 1] in ("so", "this"):
            valence *= 1.25
        elif lower[i - 3] == "without" and "doubt" in (lower[i - 2], lower[i - 1]):
            pass
        elif negated([lower[i - 3]]):
            valence *= N_SCALAR
    return valence


def _special_idioms_check(valence: float, lower: Tuple[str, ...], i: int) -> float:
    # only called with i >= 3
    onezero = f"{lower[i - 1]} {lower[i]}"
    twoonezero = f"{lower[i - 2]} {lower[i - 1]} {lower[i]}"
    twoone = f"{lower[i - 2]} {lower[i - 1]}"
    threetwoone = f"{lower[i - 3]} {lower[i - 2]} {lower[i - 1]}"
    threetwo = f"{lower[i - 3]} {lower[i - 2]}"

    for seq in (onezero, twoonezero, twoone, threetwoone, threetwo):
        if seq in SPECIAL_CASES:
            valence = SPECIAL_CASES[seq]
            break

    if len(lower) - 1 > i:
        zeroone = f"{lower[i]} {lower[i + 1]}"
        if zeroone in SPECIAL_CASES:
            valence = SPECIAL_CASES[zeroone]
    if len(lower) - 1 > i + 1:
        zeroonetwo = f"{lower[i]} {lower[i + 1]} {lower[i + 2]}"
        if zeroonetwo in SPECIAL_CASES:
            valence = SPECIAL_CASES[zeroonetwo]

    # multi-word dampeners such as "kind of"
    for n_gram in (threetwoone, threetwo, twoone):
        if n_gram in BOOSTER_DICT:
            valence += BOOSTER_DICT[n_gram]
    return valence


# =============================================================================
# Analyzer
# =============================================================================

class SentimentIntensityAnalyzer:
    """Score short texts against an immutable knowledge base."""

    def __init__(
        self,
        lexicon_source: Source = None,
        emoji_source: Source = None,
        strict: bool = True,
        knowledge_base: Optional[KnowledgeBase] = None,
    ) -> None:
        if knowledge_base is None:
            knowledge_base = KnowledgeBase.load(lexicon_source, emoji_source, strict=strict)
        self.kb = knowledge_base

    @classmethod
    def from_knowledge_base(cls, kb: KnowledgeBase) -> "SentimentIntensityAnalyzer":
        return cls(knowledge_base=kb)

    # -- preparation ---------------------------------------------------------

    def prepare(self, text: str) -> str:
        return replace_emojis(text, self.kb.emojis, self.kb.max_emoji_len)

    def tokenize(self, text: str) -> TokenSequence:
        return TokenSequence.build(self.prepare(text), text)

    # -- per-token scoring ---------------------------------------------------

    def _least_check(self, valence: float, lower: Tuple[str, ...], i: int) -> float:
        if i > 0 and lower[i - 1] == "least" and lower[i - 1] not in self.kb.lexicon:
            if i == 1 or lower[i - 2] not in ("at", "very"):
                valence *= N_SCALAR
        return valence

    def sentiment_valence(self, tokens: TokenSequence, i: int) -> float:
        """Contextual valence of token ``i`` (0.0 when it carries none)."""
        lexicon = self.kb.lexicon
        words, lower = tokens.words, tokens.lower
        item_lower = lower[i]
        if item_lower not in lexicon:
            return 0.0

        valence = lexicon[item_lower]

        # "no" directly before a sentiment word negates it instead of scoring
        if item_lower == "no" and i + 1 < len(lower) and lower[i + 1] in lexicon:
            valence = 0.0
        if (
            (i > 0 and lower[i - 1] == "no")
            or (i > 1 and lower[i - 2] == "no")
            or (i > 2 and lower[i - 3] == "no" and lower[i - 1] in ("or", "nor"))
        ):
            valence = lexicon[item_lower] * N_SCALAR

        if tokens.cap_contrast and is_all_caps(words[i]):
            if valence > 0:
                valence += C_INCR
            else:
                valence -= C_INCR

        for start_i in range(3):
            j = i - (start_i + 1)
            if j < 0 or lower[j] in lexicon:
                continue
            s = scalar_inc_dec(words[j], lower[j], valence, tokens.cap_contrast)
            valence += s * WINDOW_DECAY[start_i]
            valence = _negation_check(valence, lower, start_i, i)
            if start_i == 2:
                valence = _special_idioms_check(valence, lower, i)

        return self._least_check(valence, lower, i)

    def valences(self, tokens: TokenSequence) -> List[float]:
        lower = tokens.lower
        sentiments: List[float] = []
        for i, item_lower in enumerate(lower):
            if item_lower in BOOSTER_DICT:
                sentiments.append(0.0)
            elif item_lower == "kind" and i + 1 < len(lower) and lower[i + 1] == "of":
                sentiments.append(0.0)
            else:
                sentiments.append(self.sentiment_valence(tokens, i))
        return sentiments

    def _run(self, text: str) -> Tuple[str, TokenSequence, List[float], List[float], Sentiment]:
        if not isinstance(text, str):
            raise InvalidTextError(f"Expected text as str, got {type(text).__name__}")

        prepared = self.prepare(text)
        tokens = TokenSequence.build(prepared, text)
        raw = self.valences(tokens)
        shifted = aggregate.but_check(tokens.lower, raw)
        neg, neu, pos, compound = aggregate.score_valence(shifted, prepared)
        result = Sentiment(negative=neg, neutral=neu, positive=pos, compound=compound)
        return prepared, tokens, raw, shifted, result

    # -- public API ----------------------------------------------------------

    def score(self, text: str) -> Sentiment:
        """Return negative, neutral, positive proportions and the compound score."""
        _, tokens, _, _, result = self._run(text)
        logger.debug("Scored %d tokens: compound=%.4f", len(tokens), result.compound)
        return result

    def polarity_scores(self, text: str) -> Dict[str, float]:
        """Scores keyed and rounded the way the original VADER tool reports them."""
        result = self.score(text)
        return {
            "neg": round(result.negative, 3),
            "neu": round(result.neutral, 3),
            "pos": round(result.positive, 3),
            "compound": round(result.compound, 4),
        }

    def explain(self, text: str) -> Dict[str, Any]:
        """Return a debug dictionary with intermediate artifacts for transparency."""
        prepared, tokens, raw, shifted, result = self._run(text)
        return {
            "text": text,
            "prepared": prepared,
            "tokens": list(tokens.words),
            "cap_contrast": tokens.cap_contrast,
            "valences": raw,
            "but_adjusted": shifted,
            "punctuation_amplifier": aggregate.punctuation_emphasis(prepared),
            "scores": result.to_dict(),
        }
