"""Reduce per-token valences to negative / neutral / positive / compound."""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .constants import (
    BUT_AFTER_SCALE,
    BUT_BEFORE_SCALE,
    CONTRAST_CONJUNCTION,
    EP_INCR,
    EP_MAX_COUNT,
    NORMALIZE_ALPHA,
    QM_INCR,
    QM_MAX_AMPLIFIER,
)


def normalize(score: float, alpha: float = NORMALIZE_ALPHA) -> float:
    """Squash an unbounded valence sum into [-1, 1]."""
    norm_score = score / math.hypot(score, math.sqrt(alpha))
    return max(-1.0, min(norm_score, 1.0))


def but_check(lower: Sequence[str], sentiments: List[float]) -> List[float]:
    """Halve valences before the first "but" and boost those after it."""
    if CONTRAST_CONJUNCTION not in lower:
        return sentiments
    bi = lower.index(CONTRAST_CONJUNCTION)
    out = []
    for si, valence in enumerate(sentiments):
        if si < bi:
            valence *= BUT_BEFORE_SCALE
        elif si > bi:
            valence *= BUT_AFTER_SCALE
        out.append(valence)
    return out


def _amplify_ep(text: str) -> float:
    return min(text.count("!"), EP_MAX_COUNT) * EP_INCR


def _amplify_qm(text: str) -> float:
    qm_count = text.count("?")
    if qm_count <= 1:
        return 0.0
    if qm_count <= 3:
        return qm_count * QM_INCR
    return QM_MAX_AMPLIFIER


def punctuation_emphasis(text: str) -> float:
    return _amplify_ep(text) + _amplify_qm(text)


def sift_sentiment_scores(sentiments: Sequence[float]) -> Tuple[float, float, int]:
    """Split valences into positive sum, negative sum and neutral count.

    Each non-zero valence carries an extra 1 of magnitude so that it weighs
    against the neutral tokens, which are counted as 1 each.
    """
    pos_sum = 0.0
    neg_sum = 0.0
    neu_count = 0
    for score in sentiments:
        if score > 0:
            pos_sum += score + 1
        elif score < 0:
            neg_sum += score - 1
        else:
            neu_count += 1
    return pos_sum, neg_sum, neu_count


def score_valence(sentiments: Sequence[float], text: str) -> Tuple[float, float, float, float]:
    """Return (negative, neutral, positive, compound) for a valence sequence."""
    if not sentiments:
        return 0.0, 0.0, 0.0, 0.0

    amplifier = punctuation_emphasis(text)
    sum_s = float(sum(sentiments))
    if sum_s > 0:
        sum_s += amplifier
    elif sum_s < 0:
        sum_s -= amplifier
    compound = normalize(sum_s)

    pos_sum, neg_sum, neu_count = sift_sentiment_scores(sentiments)
    if pos_sum > math.fabs(neg_sum):
        pos_sum += amplifier
    elif pos_sum < math.fabs(neg_sum):
        neg_sum -= amplifier

    total = pos_sum + math.fabs(neg_sum) + neu_count
    if total == 0:
        return 0.0, 0.0, 0.0, compound
    return (
        math.fabs(neg_sum / total),
        math.fabs(neu_count / total),
        math.fabs(pos_sum / total),
        compound,
    )
