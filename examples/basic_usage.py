"""
Basic usage of the drama detection package
Prints the analysis of sample texts and compares a tuned classifier with the default one
"""

from drama_detection import DramaClassifier, analyze_drama, has_drama, get_drama_level

# Sample texts with varying levels of drama
SAMPLES = [
    "Today is a beautiful day. The sun is shining and birds are singing.",
    "I'm a bit disappointed with the results. It could have been better.",
    "This is quite annoying and frustrating. I don't like how they handled this situation.",
    "I am absolutely furious about this terrible betrayal! How could they do this to me?!",
    "I am absolutely outraged and furious! This is a complete disaster and betrayal! "
    "I hate everything about this terrible scandal!"
]


def print_analysis(text: str):
    """Print detailed analysis of one text."""
    analysis = analyze_drama(text)

    print(f"Text: \"{text}\"")
    print(f"Contains drama: {has_drama(text)}")
    print(f"Drama level: {get_drama_level(text)}")
    print("Detailed analysis:")
    print(f"  Score: {analysis.score:g}")
    print(f"  Comparative: {analysis.comparative:.2f}")
    print(f"  Positive words: {', '.join(analysis.positive_words) or 'none'}")
    print(f"  Negative words: {', '.join(analysis.negative_words) or 'none'}")
    print(f"  {analysis.explanation}")


def main():
    print("=" * 80)
    print("DRAMA ANALYSIS EXAMPLES")
    print("=" * 80)

    for i, text in enumerate(SAMPLES, 1):
        print(f"\nSample {i}")
        print("-" * 80)
        print_analysis(text)

    print("\n" + "=" * 80)
    print("CUSTOM CLASSIFIER EXAMPLE")
    print("=" * 80)

    # Only a large score counts as drama
    strict_classifier = DramaClassifier({
        'score_threshold': 10.0,
        'comparative_threshold': 1.0,
        'negative_words_threshold': 5
    })

    mild_text = "This is slightly disappointing."
    print(f"Text: \"{mild_text}\"")
    print(f"Default classifier detects drama: {has_drama(mild_text)}")
    print(f"Strict classifier detects drama: {strict_classifier.has_drama(mild_text)}")


if __name__ == "__main__":
    main()
