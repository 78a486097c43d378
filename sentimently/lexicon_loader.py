"""
Word list loading.

Two formats are understood:
  * JSON word lists, a flat object {"good": 3, "bad": -3} (the AFINN layout)
  * VADER lexicons, tab separated: token, mean score, std dev, raw ratings
"""
import csv
import json
import logging
import os

import pandas as pd

from sentimently.sentimently import Lexicon, coerce_score

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
VADER_SUFFIXES = (".txt", ".tsv")
# std dev and raw ratings columns are ignored
VADER_COLUMNS = ['token', 'score']


class LexiconLoadError(Exception):
    """The word list is missing, unreadable or not in a known format."""

    def __init__(self, source, reason):
        super().__init__("could not load lexicon %s: %s" % (source, reason))
        self.source = source
        self.reason = reason


def read_word_list(path):
    """
    Read a JSON word list into a {lowercase word: int} dict.
    Raises LexiconLoadError.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise LexiconLoadError(path, "file not found")
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconLoadError(path, str(e))
    except json.JSONDecodeError as e:
        raise LexiconLoadError(path, "invalid JSON (%s)" % e)

    if not isinstance(data, dict):
        raise LexiconLoadError(path, "expected a JSON object, got %s" % type(data).__name__)

    word_list = {}
    for word, value in data.items():
        score = coerce_score(word, value)
        if score is not None:
            word_list[str(word).lower()] = score
    return word_list


def vader_to_word_list(path):
    """
    Read a VADER tab separated lexicon. Mean scores are rounded to integers
    and the first occurrence of a token wins.
    Raises LexiconLoadError.
    """
    try:
        df = pd.read_csv(path, sep='\t', header=None, names=VADER_COLUMNS, usecols=[0, 1],
                         quoting=csv.QUOTE_NONE, keep_default_na=False,
                         dtype={'token': str, 'score': str}, encoding='utf-8')
    except FileNotFoundError:
        raise LexiconLoadError(path, "file not found")
    except pd.errors.EmptyDataError:
        return {}
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise LexiconLoadError(path, str(e))

    df['token'] = df['token'].str.strip().str.lower()
    df['score'] = pd.to_numeric(df['score'], errors='coerce')
    skipped = df['score'].isna() | (df['token'] == '')
    if skipped.any():
        logger.debug("Skipping %d malformed rows in %s", int(skipped.sum()), path)
    df = df[~skipped].drop_duplicates(subset=['token'], keep='first')

    return {token: int(round(score)) for token, score in zip(df['token'], df['score'])}


def read_lexicon(source):
    """Strict loading by file suffix; raises LexiconLoadError."""
    source = os.fspath(source)
    suffix = os.path.splitext(source)[1].lower()
    if suffix in VADER_SUFFIXES:
        return Lexicon(vader_to_word_list(source))
    if suffix in JSON_SUFFIXES or not suffix:
        return Lexicon(read_word_list(source))
    raise LexiconLoadError(source, "unsupported file type %r" % suffix)


def load_lexicon(source):
    """
    Load a lexicon, falling back to an empty one when it cannot be read.
    The failure is logged once here and never reaches the scorer.
    """
    try:
        lexicon = read_lexicon(source)
    except LexiconLoadError as e:
        logger.warning("%s; continuing with an empty lexicon", e)
        return Lexicon.empty()
    logger.info("Loaded %d words from %s", len(lexicon), source)
    return lexicon


def write_word_list(word_list, path):
    """Save a {word: score} mapping as a sorted JSON word list."""
    ordered = {word: int(word_list[word]) for word in sorted(word_list)}
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(ordered, f, ensure_ascii=False, indent=2)
        f.write('\n')
    return path
