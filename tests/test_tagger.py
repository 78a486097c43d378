import logging

import spacy

from sentimently import Sentimently, TaggedTokenizer
from sentimently.tagger import SpacyTagger, load_pipeline


def test_blank_pipeline_skips_punctuation_and_has_no_lemmas():
    tagger = SpacyTagger(nlp=spacy.blank("en"))
    assert tagger.tag("I love cats.") == [("i", None), ("love", None), ("cats", None)]


def test_tagger_is_callable():
    tagger = SpacyTagger(nlp=spacy.blank("en"))
    assert tagger("Hello,  world!") == [("hello", None), ("world", None)]


def test_missing_model_falls_back_to_blank(caplog):
    with caplog.at_level(logging.WARNING, logger="sentimently.tagger"):
        nlp = load_pipeline("no_such_model_for_sentimently")
    assert "no_such_model_for_sentimently" in caplog.text
    assert nlp.lang == "en"


def test_tagged_scoring_with_spacy_pipeline():
    tokenizer = TaggedTokenizer(SpacyTagger(nlp=spacy.blank("en")))
    sentiment = Sentimently(lexicon={"good": 3}, tokenizer=tokenizer)
    result = sentiment.score("Very good!")
    assert result.score == 4
    assert [t.text for t in result.tokens] == ["very", "good"]


def test_tagger_lowercases_before_the_pipeline():
    seen = []

    def pipeline(text):
        seen.append(text)
        return spacy.blank("en")(text)

    SpacyTagger(nlp=pipeline).tag("Amazing Cats")
    assert seen == ["amazing cats"]
