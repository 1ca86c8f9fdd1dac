"""
Shared fixtures for drama detection tests

The fixture lexicon keeps scores deterministic without depending on the
values shipped in the VADER lexicon.
"""

import pytest

from drama_detection import DramaClassifier, LexiconSentimentScorer, ScoreResult

FIXTURE_LEXICON = {
    'terrible': -3,
    'disappointed': -2,
    'disappointing': -2,
    'annoying': -2,
    'frustrating': -2,
    'outraged': -3,
    'unbearable': -2,
    'furious': -3,
    'hate': -3,
    'better': 2,
    'like': 2,
    'nice': 3,
    'good': 3,
    'beautiful': 3,
}


class StubScorer:
    """Returns a fixed ScoreResult and records every call."""

    def __init__(self, result: ScoreResult):
        self.result = result
        self.calls = []

    def score(self, text, extras=None):
        self.calls.append((text, dict(extras or {})))
        return self.result


@pytest.fixture
def scorer():
    return LexiconSentimentScorer(base_lexicon=FIXTURE_LEXICON)


@pytest.fixture
def classifier(scorer):
    return DramaClassifier(scorer=scorer)
