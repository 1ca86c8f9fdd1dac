"""
Central configuration for the Drama Detection package
Contains thresholds, level breakpoints, drama lexicon and logging settings
"""

import logging
from pathlib import Path

# ==================== PROJECT PATHS ====================

# Only used when a log file is requested
LOGS_DIR = Path.cwd() / "logs"

# ==================== DRAMA THRESHOLDS ====================

# Default detection thresholds (any subset can be overridden per classifier)
DEFAULT_THRESHOLDS = {
    'score_threshold': 1.0,          # Minimum |score|
    'comparative_threshold': 0.1,    # Minimum |score / token count|
    'negative_words_threshold': 1    # Minimum number of negative words
}

# ==================== DRAMA LEVELS ====================

DRAMA_LEVELS = {
    0: "none",
    1: "mild",
    2: "moderate",
    3: "high",
    4: "extreme"
}

# Minimum |score| per level, checked from the top down.
# Anything dramatic below the last breakpoint is "mild".
DRAMA_LEVEL_THRESHOLDS = [
    (8, "extreme"),
    (6, "high"),
    (4, "moderate"),
]

# ==================== DRAMA LEXICON ====================

# Weight applied to every drama word (+ for positive, - for negative)
DRAMA_WORD_WEIGHT = 2

POSITIVE_DRAMA_WORDS = [
    'amazing', 'awesome', 'brilliant', 'excellent', 'extraordinary',
    'fantastic', 'incredible', 'magnificent', 'marvelous', 'outstanding',
    'phenomenal', 'remarkable', 'spectacular', 'superb', 'wonderful'
]

NEGATIVE_DRAMA_WORDS = [
    'angry', 'annoyed', 'argument', 'betrayal', 'conflict',
    'controversy', 'crisis', 'criticism', 'debate', 'disaster',
    'drama', 'dramatic', 'exaggerate', 'fight', 'furious',
    'gossip', 'hate', 'hostile', 'intense', 'jealous',
    'outrage', 'overreact', 'rage', 'scandal', 'screaming',
    'shocking', 'tension', 'toxic', 'traumatic', 'yelling'
]

# ==================== SENTIMENT SCORING ====================

# Characters replaced by spaces before splitting into tokens (apostrophes are kept)
TOKEN_STRIP_PATTERN = r'[.,/#!?$%^&*;:{}=_`"~()]'

# Decimal places kept for score and comparative
SCORE_PRECISION = 4

# ==================== LOGGING ====================

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_LEVEL = logging.INFO

# Level of the package logger created at import
PACKAGE_LOG_LEVEL = logging.WARNING
