import argparse
import sys

from sentimently.lexicon_loader import LexiconLoadError, vader_to_word_list, write_word_list
from sentimently.sentimently import coerce_score

# --- CONFIG ---
INPUT_FILE = "vader_lexicon.txt"
OUTPUT_FILE = "vader_lexicon.json"


def parse_injection(text):
    """'word=score' -> (word, int score), for --inject."""
    word, sep, value = text.rpartition("=")
    score = coerce_score(word, value) if sep else None
    if not word.strip() or score is None:
        raise argparse.ArgumentTypeError("expected word=score, got %r" % text)
    return word.strip().lower(), score


def convert(input_file=INPUT_FILE, output_file=OUTPUT_FILE, injections=()):
    print(f"🔧 Converting {input_file}...")
    word_list = vader_to_word_list(input_file)
    print(f"📖 Read {len(word_list)} entries.")

    injections = dict(injections)
    if injections:
        print(f"💉 Injecting {len(injections)} entries...")
    for word, score in injections.items():
        word_list[word.lower()] = int(score)

    print(f"💾 Saving to {output_file}...")
    write_word_list(word_list, output_file)
    print(f"✅ Done. {len(word_list)} words written.")
    return word_list


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a VADER lexicon into a JSON word list.")
    parser.add_argument("input", nargs="?", default=INPUT_FILE)
    parser.add_argument("output", nargs="?", default=OUTPUT_FILE)
    parser.add_argument("--inject", action="append", default=[], type=parse_injection,
                        metavar="WORD=SCORE", help="add or replace a word score (repeatable)")
    args = parser.parse_args(argv)
    try:
        convert(args.input, args.output, args.inject)
    except LexiconLoadError as e:
        print(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
