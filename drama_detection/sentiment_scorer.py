"""
Lexicon-based sentiment scorer
Sums per-word polarity weights from the VADER lexicon, optionally overlaid with extra weights
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer, NEGATE

from .config import TOKEN_STRIP_PATTERN, SCORE_PRECISION
from .utils import logger


@lru_cache(maxsize=1)
def load_vader_lexicon() -> Dict[str, float]:
    """Load the VADER word -> valence dictionary once per process."""
    lexicon = SentimentIntensityAnalyzer().lexicon
    logger.debug(f"VADER lexicon loaded: {len(lexicon)} entries")
    return lexicon


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase tokens.

    Punctuation from TOKEN_STRIP_PATTERN becomes whitespace; apostrophes are
    kept so contractions like "don't" stay one token.
    """
    cleaned = re.sub(TOKEN_STRIP_PATTERN, ' ', text.lower())
    return cleaned.split()


@dataclass(frozen=True)
class ScoreResult:
    """Output of a single scorer call."""
    score: float
    comparative: float
    positive_words: Tuple[str, ...] = ()
    negative_words: Tuple[str, ...] = ()
    tokens: Tuple[str, ...] = ()


class LexiconSentimentScorer:
    """
    AFINN-style scorer: every known token adds its weight to the score.

    Any object with a compatible ``score(text, extras)`` method returning a
    ScoreResult can be used in its place.
    """

    def __init__(
        self,
        base_lexicon: Optional[Mapping[str, float]] = None,
        negators: Optional[Iterable[str]] = None
    ):
        """
        Args:
            base_lexicon: Word -> weight dictionary (defaults to the VADER lexicon)
            negators: Words that flip the sign of the next token (defaults to VADER's NEGATE)
        """
        if base_lexicon is None:
            base_lexicon = load_vader_lexicon()
        self.base_lexicon = {word.lower(): weight for word, weight in base_lexicon.items()}
        self.negators = frozenset(n.lower() for n in (NEGATE if negators is None else negators))

    def score(self, text: str, extras: Optional[Mapping[str, float]] = None) -> ScoreResult:
        """
        Score text against the base lexicon merged with extras.

        Args:
            text: Text to score
            extras: Extra word weights for this call only; they override the base lexicon

        Returns:
            ScoreResult with score, comparative and matched words in text order
        """
        extras = {word.lower(): weight for word, weight in (extras or {}).items()}

        tokens = tokenize(text)

        total = 0.0
        positive = []
        negative = []
        for i, token in enumerate(tokens):
            weight = extras[token] if token in extras else self.base_lexicon.get(token)
            if not weight:
                continue

            # "not good" counts as negative
            if i > 0 and tokens[i - 1] in self.negators:
                weight = -weight

            total += weight
            if weight > 0:
                positive.append(token)
            else:
                negative.append(token)

        comparative = total / len(tokens) if tokens else 0.0

        return ScoreResult(
            score=round(total, SCORE_PRECISION),
            comparative=round(comparative, SCORE_PRECISION),
            positive_words=tuple(positive),
            negative_words=tuple(negative),
            tokens=tuple(tokens)
        )
