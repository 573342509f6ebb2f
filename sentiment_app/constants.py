"""Fixed rule constants: boosters, negations, idioms and empirical weights."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

# =============================================================================
# Empirical weights
# =============================================================================

# mean intensity change for booster / dampener words
B_INCR = 0.293
B_DECR = -0.293

# mean intensity change for an ALL CAPS sentiment word
C_INCR = 0.733
N_SCALAR = -0.74

# look-back decay for boosters at distance 1, 2, 3
WINDOW_DECAY = (1.0, 0.95, 0.9)

BUT_BEFORE_SCALE = 0.5
BUT_AFTER_SCALE = 1.5

EP_INCR = 0.292
EP_MAX_COUNT = 4
QM_INCR = 0.18
QM_MAX_AMPLIFIER = 0.96

NORMALIZE_ALPHA = 15

# =============================================================================
# Word lists
# =============================================================================

NEGATE = frozenset({
    "aint", "arent", "cannot", "cant", "couldnt", "darent", "didnt", "doesnt",
    "ain't", "aren't", "can't", "couldn't", "daren't", "didn't", "doesn't",
    "dont", "hadnt", "hasnt", "havent", "isnt", "mightnt", "mustnt", "neither",
    "don't", "hadn't", "hasn't", "haven't", "isn't", "mightn't", "mustn't",
    "neednt", "needn't", "never", "none", "nope", "nor", "not", "nothing", "nowhere",
    "oughtnt", "shant", "shouldnt", "uhuh", "wasnt", "werent",
    "oughtn't", "shan't", "shouldn't", "uh-uh", "wasn't", "weren't",
    "without", "wont", "wouldnt", "won't", "wouldn't", "rarely", "seldom", "despite",
})

BOOSTER_DICT: Mapping[str, float] = MappingProxyType({
    "absolutely": B_INCR, "amazingly": B_INCR, "awfully": B_INCR,
    "completely": B_INCR, "considerable": B_INCR, "considerably": B_INCR,
    "decidedly": B_INCR, "deeply": B_INCR, "effing": B_INCR, "enormous": B_INCR,
    "enormously": B_INCR, "entirely": B_INCR, "especially": B_INCR,
    "exceptional": B_INCR, "exceptionally": B_INCR, "extreme": B_INCR,
    "extremely": B_INCR, "fabulously": B_INCR, "flipping": B_INCR, "flippin": B_INCR,
    "frackin": B_INCR, "fracking": B_INCR, "fricking": B_INCR, "frickin": B_INCR,
    "frigging": B_INCR, "friggin": B_INCR, "fully": B_INCR, "fuckin": B_INCR,
    "fucking": B_INCR, "fuggin": B_INCR, "fugging": B_INCR, "greatly": B_INCR,
    "hella": B_INCR, "highly": B_INCR, "hugely": B_INCR, "incredible": B_INCR,
    "incredibly": B_INCR, "intensely": B_INCR, "major": B_INCR, "majorly": B_INCR,
    "more": B_INCR, "most": B_INCR, "particularly": B_INCR, "purely": B_INCR,
    "quite": B_INCR, "really": B_INCR, "remarkably": B_INCR, "so": B_INCR,
    "substantially": B_INCR, "thoroughly": B_INCR, "total": B_INCR,
    "totally": B_INCR, "tremendous": B_INCR, "tremendously": B_INCR,
    "uber": B_INCR, "unbelievably": B_INCR, "unusually": B_INCR, "utter": B_INCR,
    "utterly": B_INCR, "very": B_INCR,
    "almost": B_DECR, "barely": B_DECR, "hardly": B_DECR, "just enough": B_DECR,
    "kind of": B_DECR, "kinda": B_DECR, "kindof": B_DECR, "kind-of": B_DECR,
    "less": B_DECR, "little": B_DECR, "marginal": B_DECR, "marginally": B_DECR,
    "occasional": B_DECR, "occasionally": B_DECR, "partly": B_DECR,
    "scarce": B_DECR, "scarcely": B_DECR, "slight": B_DECR, "slightly": B_DECR,
    "somewhat": B_DECR, "sort of": B_DECR, "sorta": B_DECR, "sortof": B_DECR,
    "sort-of": B_DECR,
})

# Phrases whose valence replaces that of the word they contain.
SPECIAL_CASES: Mapping[str, float] = MappingProxyType({
    "the shit": 3, "the bomb": 3, "bad ass": 1.5, "badass": 1.5, "bus stop": 0.0,
    "yeah right": -2, "kiss of death": -1.5, "to die for": 3,
    "beating heart": 3.1, "broken heart": -2.9,
})

CONTRAST_CONJUNCTION = "but"


def negated(words: Iterable[str], include_nt: bool = True) -> bool:
    """True if any of ``words`` is a negation (or a n't contraction)."""
    lowered = [w.lower() for w in words]
    if any(w in NEGATE for w in lowered):
        return True
    if include_nt:
        return any("n't" in w for w in lowered)
    return False
