# coding: utf-8
"""
Sentimently: AFINN-style lexicon sentiment scoring.

A phrase is split into tokens, every token gets the integer polarity weight
found in the word list, and the word just before it may negate, boost or
double that weight. The totals are reported together with the mean
("comparative") score and the words that pulled the phrase either way.
"""
import logging
import math
import os
import re
from collections import namedtuple
from types import MappingProxyType

logger = logging.getLogger(__name__)

# ##Constants##

# words that take one point off the next scored word
NEGATE = \
    ["cant", "can't", "didnt", "didn't", "dont", "don't", "doesnt", "doesn't",
     "not", "non", "wont", "won't", "isnt", "isn't"]

# words that add one point of emphasis to the next scored word
INCREMENT = ["very", "really"]

# words that double the next scored word when they carry a weight themselves
HYBRID = ["super", "extremely"]

NEGATOR_SCALAR = -1
INCREMENTOR_SCALAR = 1

LEXICON_ENV = "SENTIMENTLY_LEXICON"

_NON_WORD = re.compile(r"[^\w\s]|_", re.UNICODE)


# #Data types# #

Token = namedtuple("Token", ["text", "lemma", "form"])
Token.__doc__ = """
A scoring unit.

text  -- lowercased surface form, reported in the positive/negative lists
lemma -- lowercased lemma or tag from the tagger, None when absent or equal to text
form  -- lowercased word used for the lexicon lookup
"""


def make_token(text, lemma=None, form=None):
    text = text.lower()
    if lemma is not None:
        lemma = lemma.lower()
        if not lemma or lemma == text:
            lemma = None
    return Token(text, lemma, (form or text).lower())


WeightOverride = namedtuple("WeightOverride", ["word", "score"])


class AnalysisResult(namedtuple("AnalysisResult",
                                ["phrase", "score", "comparative", "positive", "negative", "tokens"])):
    """
    Outcome of scoring one phrase.
    """
    __slots__ = ()

    @classmethod
    def empty(cls, phrase=""):
        return cls(phrase, 0, 0.0, (), (), ())

    @property
    def words(self):
        return [token.text for token in self.tokens]

    def to_dict(self):
        return {
            "phrase": self.phrase,
            "score": self.score,
            "comparative": self.comparative,
            "positive": list(self.positive),
            "negative": list(self.negative),
            "tokens": [token._asdict() for token in self.tokens],
        }


# #Static methods# #

def coerce_score(word, value):
    """
    Integer weight for ``value``, or None when it is not a usable number.
    Numeric strings are accepted; booleans, NaN and infinities are not.
    """
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            value = None
    # bool is an int subclass; true/false as a weight is a data error
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.debug("Skipping %r: non-numeric score %r", word, value)
        return None
    if isinstance(value, float) and not math.isfinite(value):
        logger.debug("Skipping %r: score %r", word, value)
        return None
    return int(round(value))


def _coerced_items(pairs):
    for word, value in pairs:
        score = coerce_score(word, value)
        if score is not None:
            yield str(word).lower(), score


def normalize_overrides(overrides):
    """
    Turn a dict, WeightOverride sequence or (word, score) pairs into a
    {lowercase word: int} dict. Unusable scores are dropped.
    """
    if not overrides:
        return {}
    if hasattr(overrides, "items"):
        overrides = overrides.items()
    return dict(_coerced_items(overrides))


class Lexicon(object):
    """
    Read-only word -> polarity table. Overrides never touch the instance they
    are merged into; ``merge`` hands back a copy.
    """

    def __init__(self, entries=None):
        self._table = MappingProxyType(dict(_coerced_items((entries or {}).items())))

    @classmethod
    def empty(cls):
        return cls()

    def lookup(self, word):
        return self._table.get(word)

    def get(self, word, default=0):
        return self._table.get(word, default)

    def merge(self, overrides):
        overrides = normalize_overrides(overrides)
        if not overrides:
            return self
        merged = dict(self._table)
        merged.update(overrides)
        return Lexicon(merged)

    def items(self):
        return self._table.items()

    def as_dict(self):
        return dict(self._table)

    def __contains__(self, word):
        return word in self._table

    def __iter__(self):
        return iter(self._table)

    def __len__(self):
        return len(self._table)

    def __repr__(self):
        return "Lexicon(%d words)" % len(self._table)


class AdjusterRules(object):
    """
    The three word classes that modify the word after them.
    """

    def __init__(self, negators=NEGATE, incrementors=INCREMENT, hybrid=HYBRID):
        self.negators = frozenset(w.lower() for w in negators)
        self.incrementors = frozenset(w.lower() for w in incrementors)
        self.hybrid = frozenset(w.lower() for w in hybrid)

    def is_negator(self, word):
        return word in self.negators

    def is_incrementor(self, word):
        return word in self.incrementors

    def is_hybrid(self, word):
        return word in self.hybrid

    def __eq__(self, other):
        if not isinstance(other, AdjusterRules):
            return NotImplemented
        return (self.negators, self.incrementors, self.hybrid) == \
               (other.negators, other.incrementors, other.hybrid)

    def __hash__(self):
        return hash((self.negators, self.incrementors, self.hybrid))


DEFAULT_ADJUSTERS = AdjusterRules()


def _token_matches(token, test):
    # surface first, then the lemma ("n't" lemmatizes to "not")
    if test(token.text):
        return True
    return token.lemma is not None and test(token.lemma)


# #Tokenizers# #

class PlainTokenizer(object):
    """
    Lowercase, drop everything but letters, digits and whitespace, split.
    """

    name = "plain"

    def __call__(self, phrase, lexicon=None):
        cleaned = _NON_WORD.sub("", phrase.lower())
        return [make_token(word) for word in cleaned.split()]


class TaggedTokenizer(object):
    """
    Token spans and lemmas come from a tagger; the lemma is scored instead of
    the surface form only when its weight has a strictly larger magnitude.
    """

    name = "tagged"

    def __init__(self, tagger=None):
        if tagger is None:
            from sentimently.tagger import SpacyTagger
            tagger = SpacyTagger()
        self.tagger = tagger

    def _tag(self, phrase):
        if hasattr(self.tagger, "tag"):
            return self.tagger.tag(phrase)
        return self.tagger(phrase)

    @staticmethod
    def choose_form(candidates, lexicon):
        chosen = candidates[0]
        chosen_weight = 0
        for candidate in candidates:
            weight = lexicon.lookup(candidate)
            if weight is not None and abs(weight) > chosen_weight:
                chosen = candidate
                chosen_weight = abs(weight)
        return chosen

    def __call__(self, phrase, lexicon=None):
        lexicon = lexicon if lexicon is not None else Lexicon.empty()
        tokens = []
        for surface, tag in self._tag(phrase):
            token = make_token(surface, tag)
            candidates = [token.text]
            if token.lemma is not None:
                candidates.append(token.lemma)
            tokens.append(token._replace(form=self.choose_form(candidates, lexicon)))
        return tokens


TOKENIZERS = {
    PlainTokenizer.name: PlainTokenizer,
    TaggedTokenizer.name: TaggedTokenizer,
}


def resolve_tokenizer(tokenizer):
    if tokenizer is None:
        return PlainTokenizer()
    if isinstance(tokenizer, str):
        try:
            return TOKENIZERS[tokenizer.lower()]()
        except KeyError:
            raise ValueError("unknown tokenizer %r, expected one of %s"
                             % (tokenizer, ", ".join(sorted(TOKENIZERS))))
    return tokenizer


def resolve_lexicon(lexicon):
    if isinstance(lexicon, Lexicon):
        return lexicon
    if lexicon is None:
        lexicon = os.environ.get(LEXICON_ENV)
        if not lexicon:
            logger.warning("No lexicon given and %s is unset; every word will score 0", LEXICON_ENV)
            return Lexicon.empty()
    if hasattr(lexicon, "items"):
        return Lexicon(lexicon)
    from sentimently.lexicon_loader import load_lexicon
    return load_lexicon(lexicon)


class Sentimently(object):
    """
    Give an AFINN-style sentiment score to short phrases.
    """

    def __init__(self, lexicon=None, adjustments=None, tokenizer="plain", add_weights=()):
        self.lexicon = resolve_lexicon(lexicon).merge(add_weights)
        self.adjustments = adjustments or DEFAULT_ADJUSTERS
        self.tokenizer = resolve_tokenizer(tokenizer)

    def score(self, phrase, add_weights=()):
        """
        Score ``phrase``. ``add_weights`` only applies to this call.
        """
        if not isinstance(phrase, str):
            phrase = "" if phrase is None else str(phrase)
        if not phrase.strip():
            return AnalysisResult.empty(phrase)

        lexicon = self.lexicon.merge(add_weights)
        tokens = self.tokenizer(phrase, lexicon)
        if not tokens:
            return AnalysisResult.empty(phrase)

        total = 0
        positive = []
        negative = []
        for i, token in enumerate(tokens):
            valence = self.token_valence(tokens, i, lexicon)
            if valence > 0:
                positive.append(token.text)
            elif valence < 0:
                negative.append(token.text)
            total += valence

        return AnalysisResult(phrase, total, total / float(len(tokens)),
                              tuple(positive), tuple(negative), tuple(tokens))

    def token_valence(self, tokens, i, lexicon):
        token = tokens[i]
        base = lexicon.get(token.form)
        if base == 0:
            return 0

        valence = base
        if i > 0:
            rules = self.adjustments
            prev = tokens[i - 1]
            if _token_matches(prev, rules.is_negator):
                valence += NEGATOR_SCALAR
            if _token_matches(prev, rules.is_incrementor):
                valence += INCREMENTOR_SCALAR
            if _token_matches(prev, rules.is_hybrid) and prev.form in lexicon:
                valence += base
        if self._boosts_next(tokens, i, lexicon):
            # only the word's own weight is folded; context it picked up stays
            logger.debug("%r folded into the word after it", token.text)
            valence -= base
        logger.debug("%r: base %d, adjusted %d", token.text, base, valence)
        return valence

    def _boosts_next(self, tokens, i, lexicon):
        # a weighted hybrid word doubling its neighbour is counted there, not twice
        if i + 1 >= len(tokens):
            return False
        token = tokens[i]
        if not _token_matches(token, self.adjustments.is_hybrid) or token.form not in lexicon:
            return False
        return lexicon.get(tokens[i + 1].form) != 0

    def score_many(self, phrases, add_weights=()):
        return [self.score(phrase, add_weights) for phrase in phrases]

    def polarity(self, phrase, add_weights=()):
        """
        1 for a positive phrase, -1 for a negative one, 0 otherwise.
        """
        total = self.score(phrase, add_weights).score
        if total > 0:
            return 1
        if total < 0:
            return -1
        return 0
