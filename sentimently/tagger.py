"""
spaCy-backed lemma tagging for the tag-aware tokenizer.
"""
import logging
import os

import spacy

logger = logging.getLogger(__name__)

MODEL_ENV = "SENTIMENTLY_SPACY_MODEL"
DEFAULT_MODEL = os.environ.get(MODEL_ENV, "en_core_web_sm")
# only the lemmatizer and what feeds it are needed
DISABLED_PIPES = ['parser', 'ner']


def load_pipeline(model=DEFAULT_MODEL):
    try:
        return spacy.load(model, disable=DISABLED_PIPES)
    except OSError:
        logger.warning("spaCy model %r not found (python -m spacy download %s); "
                       "falling back to blank('en') without lemmas", model, model)
        return spacy.blank("en")


class SpacyTagger(object):
    """
    Splits text into (surface, lemma) pairs, skipping whitespace and
    punctuation tokens.
    """

    def __init__(self, nlp=None, model=DEFAULT_MODEL):
        self.nlp = nlp if nlp is not None else load_pipeline(model)

    def tag(self, text):
        pairs = []
        # lowercased so sentence-initial words are not tagged as proper nouns
        for token in self.nlp(text.lower()):
            if token.is_space or token.is_punct:
                continue
            pairs.append((token.text, token.lemma_ or None))
        return pairs

    __call__ = tag
