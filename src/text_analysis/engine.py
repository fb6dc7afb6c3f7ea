"""Text analysis pipeline: tokens, frequencies, keywords, sentiment and entities."""

import logging
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Tuple, Union

import regex as re

from src.text_analysis import lexicon
from src.text_analysis.result import AnalysisResult, Sentiment, Statistics, WordCount

logger = logging.getLogger(__name__)

# Whitespace as JavaScript's \s defines it; Python's \s and str.strip use a different set
WHITESPACE_CHARS = (
    '\t\n\x0b\x0c\r \xa0\u1680'
    + ''.join(chr(code) for code in range(0x2000, 0x200b))
    + '\u2028\u2029\u202f\u205f\u3000\ufeff'
)

# Only ASCII letters, digits and underscore count as word characters
NON_WORD_PATTERN = re.compile(f'[^0-9A-Za-z_{WHITESPACE_CHARS}]')
WHITESPACE_PATTERN = re.compile(f'[{WHITESPACE_CHARS}]+')
SENTENCE_BREAK_PATTERN = re.compile(r'[.!?]+')
ENTITY_PATTERN = re.compile(r'\b[A-Z][a-z]*\b', flags=re.ASCII)


class TextAnalyzer:
    """Run the lexical analysis pipeline over a single block of text."""

    def __init__(self,
                 stopwords: Iterable[str] = lexicon.STOPWORDS,
                 positive_words: Iterable[str] = lexicon.POSITIVE_WORDS,
                 negative_words: Iterable[str] = lexicon.NEGATIVE_WORDS,
                 top_n: int = lexicon.TOP_WORDS_LIMIT,
                 keyword_count: int = lexicon.KEYWORD_LIMIT,
                 entity_limit: int = lexicon.ENTITY_LIMIT):
        """
        Initialize analyzer with its word lists and limits.

        Args:
            stopwords: Words dropped before counting frequencies
            positive_words: Words adding 1 to the sentiment score
            negative_words: Words subtracting 1 from the sentiment score
            top_n: Number of most frequent words to keep
            keyword_count: Number of top words reported as keywords
            entity_limit: Maximum number of distinct entities to report
        """
        self.stopwords = frozenset(stopwords)
        self.positive_words = frozenset(positive_words)
        self.negative_words = frozenset(negative_words)
        self.top_n = top_n
        self.keyword_count = keyword_count
        self.entity_limit = entity_limit

    def analyze(self, raw_text: str) -> AnalysisResult:
        """
        Analyze raw text and build the full result bundle.

        Never raises for string input; empty text gives an empty result.

        Args:
            raw_text: Text exactly as the user entered it

        Returns:
            AnalysisResult for this text
        """
        cleaned = self.normalize(raw_text)
        tokens = self.tokenize(cleaned)
        filtered = self.filter_tokens(tokens)

        top_words = self.rank_words(self.count_frequencies(filtered))
        keywords = tuple(word_count.word for word_count in top_words[:self.keyword_count])

        statistics = Statistics(
            characters=len(raw_text),
            words=len(tokens),
            unique_words=len(set(tokens)),
            sentences=self.count_sentences(raw_text),
            avg_word_length=self.average_word_length(tokens)
        )

        logger.debug("Analyzed %d characters: %d tokens, %d after filtering",
                     statistics.characters, len(tokens), len(filtered))

        return AnalysisResult(
            cleaned=cleaned,
            tokens=tokens,
            filtered=filtered,
            top_words=top_words,
            keywords=keywords,
            statistics=statistics,
            sentiment=self.score_sentiment(tokens),
            entities=self.extract_entities(raw_text)
        )

    @staticmethod
    def normalize(raw_text: str) -> str:
        """Lowercase, strip punctuation and trim surrounding whitespace."""
        return NON_WORD_PATTERN.sub('', raw_text.lower()).strip(WHITESPACE_CHARS)

    @staticmethod
    def tokenize(cleaned: str) -> Tuple[str, ...]:
        """Split normalized text on whitespace runs, dropping empty pieces."""
        return tuple(token for token in WHITESPACE_PATTERN.split(cleaned) if token)

    def filter_tokens(self, tokens: Iterable[str]) -> Tuple[str, ...]:
        """Drop stopwords and tokens too short to be meaningful."""
        return tuple(
            token for token in tokens
            if token not in self.stopwords and len(token) >= lexicon.MIN_TOKEN_LENGTH
        )

    @staticmethod
    def count_frequencies(filtered: Iterable[str]) -> Counter:
        """
        Count occurrences of each token.

        Args:
            filtered: Tokens left after filtering

        Returns:
            Counter whose key order is the order of first occurrence
        """
        return Counter(filtered)

    def rank_words(self, frequencies: Counter) -> Tuple[WordCount, ...]:
        """
        Pick the most frequent words.

        Counter.most_common keeps words with equal counts in the order they were
        first seen, so ties are resolved by first occurrence.

        Args:
            frequencies: Counter built by count_frequencies

        Returns:
            Up to top_n WordCount entries, highest count first
        """
        return tuple(WordCount(word, count) for word, count in frequencies.most_common(self.top_n))

    @staticmethod
    def count_sentences(raw_text: str) -> int:
        """Count non-blank segments between runs of '.', '!' and '?'."""
        return sum(1 for segment in SENTENCE_BREAK_PATTERN.split(raw_text)
                   if segment.strip(WHITESPACE_CHARS))

    @staticmethod
    def average_word_length(tokens: Tuple[str, ...]) -> Union[float, int]:
        """
        Mean token length rounded to one decimal place.

        Halves round up on the exact binary value of the mean (2.25 -> 2.3).

        Args:
            tokens: All tokens, before stopword filtering

        Returns:
            Rounded mean, or 0 when there are no tokens
        """
        if not tokens:
            return 0

        mean = sum(len(token) for token in tokens) / len(tokens)
        return float(Decimal(mean).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))

    def score_sentiment(self, tokens: Iterable[str]) -> Sentiment:
        """Add one per positive token, subtract one per negative token, then label."""
        score = 0
        for token in tokens:
            if token in self.positive_words:
                score += 1
            if token in self.negative_words:
                score -= 1

        if score > lexicon.POSITIVE_THRESHOLD:
            label = 'positive'
        elif score < lexicon.NEGATIVE_THRESHOLD:
            label = 'negative'
        else:
            label = 'neutral'

        return Sentiment(label=label, score=score)

    def extract_entities(self, raw_text: str) -> Tuple[str, ...]:
        """
        Find capitalized words in the original text.

        This is a plain pattern match (capital letter followed by lowercase
        letters), not real named-entity recognition.

        Args:
            raw_text: Unnormalized input text

        Returns:
            Distinct matches in order of first appearance, at most entity_limit
        """
        matches: List[str] = ENTITY_PATTERN.findall(raw_text)
        unique = list(dict.fromkeys(matches))
        return tuple(unique[:self.entity_limit])


DEFAULT_ANALYZER = TextAnalyzer()


def analyze(raw_text: str) -> AnalysisResult:
    """Analyze text with the default word lists and limits."""
    return DEFAULT_ANALYZER.analyze(raw_text)
