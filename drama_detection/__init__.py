"""
Drama Detection

Classifies the emotional "drama" intensity of short texts.

Components:
- lexicon: Drama word lists used to bias the sentiment score
- sentiment_scorer: Lexicon-based sentiment scoring (VADER lexicon)
- drama_classifier: Threshold rules and 5-level intensity (none to extreme)
"""

from .drama_classifier import (
    DramaThresholds,
    DramaLevel,
    DramaAnalysisResult,
    DramaClassifier,
    analyze_drama,
    has_drama,
    get_drama_level
)
from .errors import DramaDetectionError, EmptyInputError, InvalidConfigurationError
from .lexicon import DramaLexicon
from .sentiment_scorer import LexiconSentimentScorer, ScoreResult
from .utils import setup_logger

__all__ = [
    'DramaThresholds',
    'DramaLevel',
    'DramaAnalysisResult',
    'DramaClassifier',
    'DramaLexicon',
    'LexiconSentimentScorer',
    'ScoreResult',
    'DramaDetectionError',
    'EmptyInputError',
    'InvalidConfigurationError',
    'analyze_drama',
    'has_drama',
    'get_drama_level',
    'setup_logger'
]

__version__ = '1.0.0'
