"""
Benchmarking a scorer against star-rated reviews.

Reviews are objects with a "content" text and a "starRating" of 1..5, either
bare in a list or under a "reviews" key (the LaRoSeDa layout). 1-2 stars count
as negative, 4-5 as positive and 3 is left out.
"""
import json
import logging
from collections import namedtuple

import requests
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics import accuracy_score, classification_report, confusion_matrix
from tqdm import tqdm

logger = logging.getLogger(__name__)

TARGET_NAMES = ["Negative", "Positive"]
REQUEST_TIMEOUT = 30

EvaluationReport = namedtuple(
    "EvaluationReport",
    ["accuracy", "report", "confusion", "false_positives", "false_negatives"])


def fetch_reviews(source, timeout=REQUEST_TIMEOUT):
    """
    Load reviews from an http(s) URL or a local JSON file.
    Network and HTTP errors propagate.
    """
    source = str(source)
    if source.startswith(("http://", "https://")):
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    else:
        with open(source, 'r', encoding='utf-8') as f:
            data = json.load(f)

    if isinstance(data, dict):
        if "reviews" not in data:
            raise ValueError("%s: expected a list of reviews or a {\"reviews\": [...]} object" % source)
        data = data["reviews"]
    if not isinstance(data, list):
        raise ValueError("%s: reviews must be a JSON list, got %s" % (source, type(data).__name__))
    logger.info("Loaded %d reviews from %s", len(data), source)
    return data


def star_label(stars):
    if stars is None:
        return None
    try:
        stars = int(stars)
    except (TypeError, ValueError):
        return None
    if stars == 3:
        return None
    return 1 if stars > 3 else 0


def label_reviews(reviews):
    """Return (texts, labels), skipping neutral and unrated reviews."""
    texts = []
    labels = []
    for item in reviews:
        label = star_label(item.get("starRating"))
        if label is None:
            continue
        texts.append(item.get("content") or "")
        labels.append(label)
    return texts, labels


def predict(scorer, texts, threshold=0.0, progress=True):
    """1 where the comparative score is above ``threshold``, else 0."""
    predictions = []
    for text in tqdm(texts, disable=not progress):
        predictions.append(1 if scorer.score(text).comparative > threshold else 0)
    return predictions


def evaluate(scorer, texts, labels, threshold=0.0, progress=True):
    predictions = predict(scorer, texts, threshold, progress)

    false_positives = []
    false_negatives = []
    for text, truth, guess in zip(texts, labels, predictions):
        if guess == 1 and truth == 0:
            false_positives.append(text)
        elif guess == 0 and truth == 1:
            false_negatives.append(text)

    return EvaluationReport(
        accuracy=accuracy_score(labels, predictions),
        report=classification_report(labels, predictions, labels=[0, 1],
                                     target_names=TARGET_NAMES, zero_division=0),
        confusion=confusion_matrix(labels, predictions, labels=[0, 1]),
        false_positives=false_positives,
        false_negatives=false_negatives,
    )


def top_error_words(texts, top_n=25, stop_words="english"):
    """Most frequent words across misclassified texts as (word, count) pairs."""
    texts = [t for t in texts if t and t.strip()]
    if not texts:
        return []
    vec = CountVectorizer(stop_words=stop_words, max_features=max(top_n, 1))
    try:
        X = vec.fit_transform(texts)
    except ValueError:
        # nothing left after stop word removal
        return []
    sum_words = X.sum(axis=0)
    words_freq = [(word, int(sum_words[0, idx])) for word, idx in vec.vocabulary_.items()]
    words_freq.sort(key=lambda x: (-x[1], x[0]))
    return words_freq[:top_n]
