"""
Exceptions raised by the drama detection package
"""


class DramaDetectionError(Exception):
    """Base class for all drama detection errors."""


class EmptyInputError(DramaDetectionError, ValueError):
    """Text to analyze is empty, None or not a string."""


class InvalidConfigurationError(DramaDetectionError, ValueError):
    """Thresholds or lexicon contain values that cannot be used."""
