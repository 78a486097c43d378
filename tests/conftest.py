"""
Shared fixtures for the scorer, loader and evaluation tests.
"""
import json

import pytest

from sentimently import Lexicon, Sentimently


AFINN_SAMPLE = {
    "good": 3,
    "bad": -3,
    "love": 3,
    "stupid": -2,
    "amazing": 4,
    "extremely": 1,
    "super": 3,
    "hate": -3,
}


class FakeTagger(object):
    """Returns canned (surface, lemma) pairs, one list per call."""

    def __init__(self, pairs):
        self.pairs = list(pairs)
        self.calls = []

    def tag(self, text):
        self.calls.append(text)
        return list(self.pairs)


@pytest.fixture
def afinn_sample():
    return dict(AFINN_SAMPLE)


@pytest.fixture
def lexicon(afinn_sample):
    return Lexicon(afinn_sample)


@pytest.fixture
def scorer(lexicon):
    return Sentimently(lexicon=lexicon)


@pytest.fixture
def word_list_file(tmp_path, afinn_sample):
    path = tmp_path / "AFINN.json"
    path.write_text(json.dumps(afinn_sample), encoding="utf-8")
    return path


@pytest.fixture
def vader_file(tmp_path):
    path = tmp_path / "vader_lexicon.txt"
    path.write_text(
        "good\t1.9\t0.94339\t[2, 1, 2, 3, 2, 2, 1, 2, 2, 2]\n"
        "horrible\t-2.7\t0.64031\t[-3, -3, -2, -4, -2, -3, -2, -3, -2, -3]\n"
        ":)\t2.0\t1.18322\t[2, 2, 1, 1, 1, 1, 4, 3, 4, 1]\n"
        "Nice\t1.8\t0.6\t[2, 2, 1, 2, 2, 2, 1, 2, 2, 2]\n"
        "broken\tnot-a-number\t0.1\t[]\n"
        "good\t-4.0\t0.1\t[]\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def reviews():
    return [
        {"content": "Good product, I love it", "starRating": "5"},
        {"content": "Bad and stupid design", "starRating": "1"},
        {"content": "It is okay", "starRating": "3"},
        {"content": "Not bad at all", "starRating": "4"},
        {"content": "I hate this", "starRating": 2},
        {"content": "no rating here"},
    ]


@pytest.fixture
def fake_tagger():
    return FakeTagger
