import argparse
import sys

import requests

from sentimently import Sentimently
from sentimently.evaluation import evaluate, fetch_reviews, label_reviews, top_error_words

# --- CONFIG ---
LEXICON_FILE = "AFINN-165.json"
THRESHOLD = 0.0
TOP_WORDS = 25


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark Sentimently on star-rated reviews.")
    parser.add_argument("--dataset", required=True,
                        help="URL or path of a JSON list of {\"content\", \"starRating\"} reviews")
    parser.add_argument("--lexicon", default=LEXICON_FILE, help="JSON word list or VADER lexicon")
    parser.add_argument("--tokenizer", default="plain", choices=["plain", "tagged"])
    parser.add_argument("--threshold", type=float, default=THRESHOLD)
    parser.add_argument("--top", type=int, default=TOP_WORDS, help="words to list per error type")
    return parser.parse_args(argv)


def print_top_words(title, texts, top_n):
    if not texts:
        return
    print(f"\n🔍 {title}")
    for i, (word, freq) in enumerate(top_error_words(texts, top_n)):
        print(f"{i+1}. {word}: {freq}")


def run_benchmark(argv=None):
    args = parse_args(argv)

    print(f"⬇️  Loading reviews from {args.dataset}...")
    try:
        reviews = fetch_reviews(args.dataset)
    except (requests.RequestException, OSError, ValueError) as e:
        print(f"❌ Download Error: {e}")
        return 1
    texts, labels = label_reviews(reviews)
    print(f"✅ Loaded {len(texts)} labelled reviews.")

    analyzer = Sentimently(lexicon=args.lexicon, tokenizer=args.tokenizer)

    print("🚀 Running Analysis...")
    result = evaluate(analyzer, texts, labels, threshold=args.threshold)

    print("\n" + "="*50)
    print("🏁 FINAL RESULTS")
    print("="*50)
    print(f"✅ Accuracy: {result.accuracy:.4f} ({result.accuracy*100:.2f}%)")

    print("\n📊 Classification Report:")
    print(result.report)

    cm = result.confusion
    print("\n📉 Confusion Matrix:")
    print(f"True Neg: {cm[0][0]}\t| False Pos: {cm[0][1]}")
    print(f"False Neg: {cm[1][0]}\t| True Pos: {cm[1][1]}")
    print("="*50)

    print(f"False Positives: {len(result.false_positives)}")
    print(f"False Negatives: {len(result.false_negatives)}")
    print_top_words("TOP WORDS IN FALSE POSITIVES", result.false_positives, args.top)
    print_top_words("TOP WORDS IN FALSE NEGATIVES", result.false_negatives, args.top)
    return 0


if __name__ == "__main__":
    sys.exit(run_benchmark())
