"""
Drama Classification System
Rule-based drama detection with a 5-level intensity (none to extreme)

Components:
1. DramaThresholds - Validated, immutable detection thresholds
2. DramaLevel - Closed drama intensity enumeration
3. DramaAnalysisResult - Immutable result of one analysis
4. DramaClassifier - Main class combining scorer, lexicon and thresholds
"""

import math
from dataclasses import dataclass, fields, replace, asdict
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .config import DEFAULT_THRESHOLDS, DRAMA_LEVELS, DRAMA_LEVEL_THRESHOLDS
from .errors import EmptyInputError, InvalidConfigurationError
from .lexicon import DramaLexicon
from .sentiment_scorer import LexiconSentimentScorer
from .utils import logger

# ==================== THRESHOLDS ====================

@dataclass(frozen=True)
class DramaThresholds:
    """
    Detection thresholds.

    A signal fires when its value reaches (>=) the threshold.
    """
    score_threshold: float = DEFAULT_THRESHOLDS['score_threshold']
    comparative_threshold: float = DEFAULT_THRESHOLDS['comparative_threshold']
    negative_words_threshold: int = DEFAULT_THRESHOLDS['negative_words_threshold']

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
                raise InvalidConfigurationError(f"{f.name} must be a number, got {value!r}")
            if value < 0:
                raise InvalidConfigurationError(f"{f.name} must be >= 0, got {value!r}")

        count = self.negative_words_threshold
        if isinstance(count, float):
            if not count.is_integer():
                raise InvalidConfigurationError(
                    f"negative_words_threshold must be a whole number, got {count!r}"
                )
            # Frozen dataclass: bypass __setattr__ for the int normalization
            object.__setattr__(self, 'negative_words_threshold', int(count))

    @classmethod
    def from_value(
        cls,
        thresholds: Union['DramaThresholds', Mapping[str, Any], None]
    ) -> 'DramaThresholds':
        """Build thresholds from None (defaults), a partial mapping or an existing instance."""
        if thresholds is None:
            return cls()
        if isinstance(thresholds, cls):
            return thresholds
        if isinstance(thresholds, Mapping):
            return cls().merged(thresholds)
        raise InvalidConfigurationError(
            f"Thresholds must be a mapping or DramaThresholds, got {type(thresholds).__name__}"
        )

    def merged(self, overrides: Mapping[str, Any]) -> 'DramaThresholds':
        """
        Return new thresholds with overrides applied.

        Fields not present in overrides keep their current values.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown threshold(s): {', '.join(sorted(unknown))}. "
                f"Available: {', '.join(sorted(known))}"
            )
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

# ==================== DRAMA LEVEL ====================

class DramaLevel(str, Enum):
    """Drama intensity, ordered none < mild < moderate < high < extreme."""
    NONE = DRAMA_LEVELS[0]
    MILD = DRAMA_LEVELS[1]
    MODERATE = DRAMA_LEVELS[2]
    HIGH = DRAMA_LEVELS[3]
    EXTREME = DRAMA_LEVELS[4]

    @property
    def rank(self) -> int:
        """Ordinal position (0 for none, 4 for extreme)."""
        return _LEVEL_RANKS[self.value]

    def __str__(self) -> str:
        return self.value


_LEVEL_RANKS = {name: rank for rank, name in DRAMA_LEVELS.items()}

# ==================== ANALYSIS RESULT ====================

@dataclass(frozen=True)
class DramaAnalysisResult:
    """Result of analyzing one text. Word lists are tuples so the result stays immutable."""
    text: str
    has_drama: bool
    score: float
    comparative: float
    positive_count: int
    negative_count: int
    positive_words: Tuple[str, ...]
    negative_words: Tuple[str, ...]
    drama_level: DramaLevel
    drama_words: Tuple[str, ...] = ()
    triggers: Tuple[str, ...] = ()

    @property
    def explanation(self) -> str:
        """Human-readable explanation of the classification."""
        if not self.has_drama:
            return "No drama - no signal reached its threshold"

        parts = []
        if 'score' in self.triggers:
            parts.append(f"score {self.score:g}")
        if 'comparative' in self.triggers:
            parts.append(f"comparative {self.comparative:.2f}")
        if 'negative_words' in self.triggers:
            parts.append(
                f"{self.negative_count} negative word(s) ({', '.join(self.negative_words)})"
            )
        if 'drama_words' in self.triggers:
            parts.append(f"drama words ({', '.join(self.drama_words)})")

        return f"{self.drama_level.value.capitalize()} drama due to: {', '.join(parts)}"

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary with list values and the level as a string."""
        result = asdict(self)
        result['drama_level'] = self.drama_level.value
        for key in ('positive_words', 'negative_words', 'drama_words', 'triggers'):
            result[key] = list(result[key])
        return result

# ==================== DRAMA CLASSIFIER (MAIN) ====================

class DramaClassifier:
    """
    Main drama classification system.

    Combines:
    - Lexicon sentiment score (VADER lexicon + drama words)
    - Four drama signals (score, comparative, negative word count, drama words)
    - Configurable thresholds

    Outputs:
    - has_drama flag
    - Drama level (none, mild, moderate, high, extreme)

    Thresholds are replaced as a whole on every update, so analyze() always
    works on one consistent snapshot.
    """

    def __init__(
        self,
        thresholds: Union[DramaThresholds, Mapping[str, Any], None] = None,
        lexicon: Optional[DramaLexicon] = None,
        scorer=None
    ):
        """
        Initialize classifier.

        Args:
            thresholds: Partial threshold overrides, merged over the defaults
            lexicon: Drama lexicon (defaults to the built-in one)
            scorer: Object with score(text, extras) -> ScoreResult
                (defaults to LexiconSentimentScorer)
        """
        self._thresholds = DramaThresholds.from_value(thresholds)
        self.lexicon = lexicon if lexicon is not None else DramaLexicon.default()
        self.scorer = scorer if scorer is not None else LexiconSentimentScorer()
        self._extras = self.lexicon.extras()

        logger.debug(f"Drama classifier initialized: {self._thresholds}, {self.lexicon!r}")

    @property
    def thresholds(self) -> DramaThresholds:
        return self._thresholds

    def update_thresholds(
        self,
        thresholds: Union[DramaThresholds, Mapping[str, Any], None] = None,
        **overrides
    ) -> DramaThresholds:
        """
        Merge new values into the current thresholds.

        Unspecified fields are kept. Invalid values raise
        InvalidConfigurationError and leave the classifier unchanged.

        Returns:
            The updated thresholds
        """
        changes = {}
        if isinstance(thresholds, DramaThresholds):
            changes.update(thresholds.to_dict())
        elif thresholds is not None:
            if not isinstance(thresholds, Mapping):
                raise InvalidConfigurationError(
                    f"Thresholds must be a mapping or DramaThresholds, got {type(thresholds).__name__}"
                )
            changes.update(thresholds)
        changes.update(overrides)

        try:
            updated = self._thresholds.merged(changes)
        except InvalidConfigurationError as e:
            logger.warning(f"Rejected threshold update {changes}: {e}")
            raise

        self._thresholds = updated
        logger.info(f"Drama thresholds updated: {updated.to_dict()}")
        return updated

    @staticmethod
    def score_to_level(score: float) -> DramaLevel:
        """
        Convert a sentiment score to a drama level.

        Only meaningful once drama has been detected; the minimum is MILD.
        """
        abs_score = abs(score)
        for min_score, level_name in DRAMA_LEVEL_THRESHOLDS:
            if abs_score >= min_score:
                return DramaLevel(level_name)
        return DramaLevel.MILD

    def analyze(self, text: str) -> DramaAnalysisResult:
        """
        Complete drama analysis of text.

        Args:
            text: Text to analyze

        Returns:
            DramaAnalysisResult

        Raises:
            EmptyInputError: If text is empty, None or not a string
        """
        if not isinstance(text, str) or not text:
            raise EmptyInputError("Text must be a non-empty string")

        thresholds = self._thresholds

        sentiment = self.scorer.score(text, self._extras)
        drama_words = self.lexicon.find_drama_words(text)

        signals = (
            ('score', abs(sentiment.score) >= thresholds.score_threshold),
            ('comparative', abs(sentiment.comparative) >= thresholds.comparative_threshold),
            ('negative_words', len(sentiment.negative_words) >= thresholds.negative_words_threshold),
            ('drama_words', len(drama_words) > 0),
        )
        triggers = tuple(name for name, fired in signals if fired)
        has_drama = len(triggers) > 0

        drama_level = self.score_to_level(sentiment.score) if has_drama else DramaLevel.NONE

        logger.debug(
            f"Analyzed {len(text)} chars: score={sentiment.score}, "
            f"comparative={sentiment.comparative}, triggers={triggers}, level={drama_level.value}"
        )

        return DramaAnalysisResult(
            text=text,
            has_drama=has_drama,
            score=sentiment.score,
            comparative=sentiment.comparative,
            positive_count=len(sentiment.positive_words),
            negative_count=len(sentiment.negative_words),
            positive_words=tuple(sentiment.positive_words),
            negative_words=tuple(sentiment.negative_words),
            drama_level=drama_level,
            drama_words=tuple(drama_words),
            triggers=triggers
        )

    def has_drama(self, text: str) -> bool:
        """Check if text contains drama."""
        return self.analyze(text).has_drama

    def get_drama_level(self, text: str) -> DramaLevel:
        """Get the drama level of the text."""
        return self.analyze(text).drama_level

# ==================== DEFAULT INSTANCE ====================

# Built once at import with default thresholds; nothing below mutates it
_default_classifier = DramaClassifier()


def analyze_drama(text: str) -> DramaAnalysisResult:
    """Analyze text for drama using default settings."""
    return _default_classifier.analyze(text)


def has_drama(text: str) -> bool:
    """Check if text contains drama using default settings."""
    return _default_classifier.has_drama(text)


def get_drama_level(text: str) -> DramaLevel:
    """Get the drama level of the text using default settings."""
    return _default_classifier.get_drama_level(text)
