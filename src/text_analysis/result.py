"""Immutable containers for a single text analysis."""

from dataclasses import dataclass, field
from typing import Tuple, Union

SENTIMENT_LABELS = ('positive', 'negative', 'neutral')


@dataclass(frozen=True)
class WordCount:
    word: str
    count: int

    def to_dict(self) -> dict:
        return {'word': self.word, 'count': self.count}


@dataclass(frozen=True)
class Statistics:
    """Summary counts over the raw text and its tokens."""

    characters: int = 0
    words: int = 0
    unique_words: int = 0
    sentences: int = 0
    avg_word_length: Union[float, int] = 0

    def to_dict(self) -> dict:
        return {
            'characters': self.characters,
            'words': self.words,
            'uniqueWords': self.unique_words,
            'sentences': self.sentences,
            'avgWordLength': self.avg_word_length
        }


@dataclass(frozen=True)
class Sentiment:
    """Heuristic sentiment: a label plus the raw integer score behind it."""

    label: str = 'neutral'
    score: int = 0

    def __post_init__(self):
        if self.label not in SENTIMENT_LABELS:
            raise ValueError(f"Unknown sentiment label: {self.label}")

    def to_dict(self) -> dict:
        return {'label': self.label, 'score': self.score}


@dataclass(frozen=True)
class AnalysisResult:
    """
    Everything produced by one call to analyze().

    Sequences are stored as tuples so a result can't be changed after it is built.
    """

    cleaned: str = ''
    tokens: Tuple[str, ...] = ()
    filtered: Tuple[str, ...] = ()
    top_words: Tuple[WordCount, ...] = ()
    keywords: Tuple[str, ...] = ()
    statistics: Statistics = field(default_factory=Statistics)
    sentiment: Sentiment = field(default_factory=Sentiment)
    entities: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """
        Convert the result to the exported JSON shape.

        Returns:
            Dictionary with keys: cleaned, tokens, filtered, topWords, keywords,
            statistics, sentiment, entities
        """
        return {
            'cleaned': self.cleaned,
            'tokens': list(self.tokens),
            'filtered': list(self.filtered),
            'topWords': [word_count.to_dict() for word_count in self.top_words],
            'keywords': list(self.keywords),
            'statistics': self.statistics.to_dict(),
            'sentiment': self.sentiment.to_dict(),
            'entities': list(self.entities)
        }
