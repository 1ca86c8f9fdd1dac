"""
Tests for the lexicon sentiment scorer
"""

from drama_detection import LexiconSentimentScorer, ScoreResult
from drama_detection.sentiment_scorer import tokenize, load_vader_lexicon


def test_tokenize_strips_punctuation_and_keeps_apostrophes():
    assert tokenize("Hello, WORLD!! Don't (panic)...") == ['hello', 'world', "don't", 'panic']
    assert tokenize("!!!") == []


def test_score_sums_weights_in_text_order(scorer):
    result = scorer.score("Nice day, terrible traffic, good coffee.")

    assert isinstance(result, ScoreResult)
    assert result.score == 3
    assert result.positive_words == ('nice', 'good')
    assert result.negative_words == ('terrible',)
    assert result.tokens == ('nice', 'day', 'terrible', 'traffic', 'good', 'coffee')
    assert result.comparative == 0.5


def test_extras_override_base_lexicon(scorer):
    result = scorer.score("furious", {'furious': -2})

    assert result.score == -2


def test_extras_apply_to_one_call_only(scorer):
    scorer.score("scandal", {'scandal': -2})
    result = scorer.score("scandal")

    assert result.score == 0
    assert result.negative_words == ()


def test_negation_flips_sign(scorer):
    result = scorer.score("This is not good")

    assert result.score == -3
    assert result.negative_words == ('good',)
    assert result.positive_words == ()


def test_custom_negators():
    scorer = LexiconSentimentScorer(base_lexicon={'good': 3}, negators=['hardly'])

    assert scorer.score("hardly good").score == -3
    assert scorer.score("not good").score == 3


def test_no_tokens_gives_zero_comparative(scorer):
    result = scorer.score("?!...")

    assert result.score == 0
    assert result.comparative == 0.0


def test_base_lexicon_keys_are_lowercased():
    scorer = LexiconSentimentScorer(base_lexicon={'Great': 3})

    assert scorer.score("GREAT").score == 3


def test_float_scores_are_rounded():
    scorer = LexiconSentimentScorer(base_lexicon={'a': 0.1, 'b': 0.2})

    result = scorer.score("a b")
    assert result.score == 0.3
    assert result.comparative == 0.15


def test_default_scorer_uses_vader_lexicon():
    lexicon = load_vader_lexicon()
    scorer = LexiconSentimentScorer()

    assert len(lexicon) > 1000
    assert load_vader_lexicon() is lexicon, "Lexicon should be loaded once"
    assert scorer.score("scandal", {'scandal': -2}).score == -2


class LookupOnlyLexicon(dict):
    """Base lexicon that only allows per-word lookups."""

    def __iter__(self):
        raise AssertionError("Base lexicon should not be iterated while scoring")

    def keys(self):
        raise AssertionError("Base lexicon should not be copied while scoring")

    def items(self):
        raise AssertionError("Base lexicon should not be copied while scoring")


def test_extras_do_not_copy_base_lexicon(scorer):
    scorer.base_lexicon = LookupOnlyLexicon({'terrible': -3, 'nice': 3})

    result = scorer.score("Nice scandal, terrible SCANDAL", {'Scandal': -2, 'nice': 1})

    assert result.score == -6
    assert result.positive_words == ('nice',)
    assert result.negative_words == ('scandal', 'terrible', 'scandal')
    assert dict.get(scorer.base_lexicon, 'scandal') is None, "Extras must not leak into the base lexicon"
