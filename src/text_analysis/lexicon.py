"""Static word lists and limits used by the text analyzer."""

STOPWORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'is', 'are', 'was', 'were', 'be', 'been',
    'i', 'you', 'he', 'she', 'it', 'we', 'they', 'this', 'that'
])

POSITIVE_WORDS = frozenset([
    'amazing', 'love', 'great', 'awesome', 'excellent', 'good', 'best', 'beautiful'
])

NEGATIVE_WORDS = frozenset([
    'hate', 'bad', 'worst', 'terrible', 'horrible', 'poor', 'awful'
])

# Tokens shorter than this never reach the frequency table
MIN_TOKEN_LENGTH = 3

TOP_WORDS_LIMIT = 8
KEYWORD_LIMIT = 5
ENTITY_LIMIT = 5

# Score must be strictly above / below these to leave "neutral"
POSITIVE_THRESHOLD = 2
NEGATIVE_THRESHOLD = -2
