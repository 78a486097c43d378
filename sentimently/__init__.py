from sentimently.sentimently import (
    DEFAULT_ADJUSTERS,
    AdjusterRules,
    AnalysisResult,
    Lexicon,
    PlainTokenizer,
    Sentimently,
    TaggedTokenizer,
    Token,
    WeightOverride,
)
from sentimently.lexicon_loader import LexiconLoadError, load_lexicon

__all__ = [
    "DEFAULT_ADJUSTERS",
    "AdjusterRules",
    "AnalysisResult",
    "Lexicon",
    "LexiconLoadError",
    "PlainTokenizer",
    "Sentimently",
    "TaggedTokenizer",
    "Token",
    "WeightOverride",
    "load_lexicon",
]
