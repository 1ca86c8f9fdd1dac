"""
Drama Lexicon
Extra positive/negative words that bias the sentiment scorer toward drama vocabulary
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .config import DRAMA_WORD_WEIGHT, POSITIVE_DRAMA_WORDS, NEGATIVE_DRAMA_WORDS
from .errors import InvalidConfigurationError

# ==================== DRAMA LEXICON ====================

class DramaLexicon:
    """
    Fixed set of drama words with fixed weights.

    Positive words score +weight and negative words -weight when merged
    over the scorer's base dictionary. Negative words are also used for a
    raw substring scan of the input text.
    """

    def __init__(
        self,
        positive: Optional[Iterable[str]] = None,
        negative: Optional[Iterable[str]] = None,
        weight: int = DRAMA_WORD_WEIGHT
    ):
        """
        Initialize lexicon with word lists.

        Args:
            positive: Positive drama words (defaults to POSITIVE_DRAMA_WORDS)
            negative: Negative drama words (defaults to NEGATIVE_DRAMA_WORDS)
            weight: Absolute weight of every drama word
        """
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight <= 0:
            raise InvalidConfigurationError(f"Lexicon weight must be a positive number, got {weight!r}")

        self._positive = self._normalize_words(
            POSITIVE_DRAMA_WORDS if positive is None else positive
        )
        self._negative = self._normalize_words(
            NEGATIVE_DRAMA_WORDS if negative is None else negative
        )
        self._weight = weight

        overlap = set(self._positive) & set(self._negative)
        if overlap:
            raise InvalidConfigurationError(
                f"Words cannot be both positive and negative: {', '.join(sorted(overlap))}"
            )

    @classmethod
    def default(cls) -> 'DramaLexicon':
        """Built-in drama lexicon."""
        return cls()

    @staticmethod
    def _normalize_words(words: Iterable[str]) -> Tuple[str, ...]:
        """Lowercase and de-duplicate words, keeping first-seen order."""
        if isinstance(words, str):
            raise InvalidConfigurationError("Word lists must be iterables of strings, not a string")

        normalized = []
        for word in words:
            if not isinstance(word, str) or not word.strip():
                raise InvalidConfigurationError(f"Invalid lexicon word: {word!r}")
            word = word.strip().lower()
            if word not in normalized:
                normalized.append(word)

        return tuple(normalized)

    @property
    def positive(self) -> Tuple[str, ...]:
        return self._positive

    @property
    def negative(self) -> Tuple[str, ...]:
        return self._negative

    @property
    def weight(self):
        return self._weight

    def extras(self) -> Dict[str, int]:
        """
        Extra weights to merge with the scorer's base dictionary.

        Returns:
            New dictionary of word -> signed weight
        """
        extras = {word: self._weight for word in self._positive}
        extras.update({word: -self._weight for word in self._negative})
        return extras

    def find_drama_words(self, text: str) -> List[str]:
        """
        Find negative drama words anywhere in the raw text.

        This is a case-insensitive substring scan, independent of tokenization,
        so "melodramatic" matches "drama".

        Returns:
            Matched words in lexicon order
        """
        text_lower = text.lower()
        return [word for word in self._negative if word in text_lower]

    def __contains__(self, word: str) -> bool:
        word = word.lower()
        return word in self._positive or word in self._negative

    def __len__(self) -> int:
        return len(self._positive) + len(self._negative)

    def __repr__(self) -> str:
        return (
            f"DramaLexicon(positive={len(self._positive)}, "
            f"negative={len(self._negative)}, weight={self._weight})"
        )
