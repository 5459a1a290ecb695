import re

from .config import ClassifierConfig
from .errors import InvalidArgumentError

# Punctuation, digits and underscores become word separators
_NON_WORD = re.compile(r"[^\w\s]|[\d_]")


def clean_text(text):
    if text is None:
        return ""
    return _NON_WORD.sub(" ", text.lower())


def split_words(text):
    """Lowercased words of text, in order, duplicates kept."""
    return clean_text(text).split()


class NGramStrategy:
    """
    Turns raw text into a set of tokens. Subclasses only decide what a token is;
    duplicates collapse and order does not matter.
    """
    name = None

    def get_ngram(self, text):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Unigram(NGramStrategy):
    name = "unigram"

    def get_ngram(self, text):
        return set(split_words(text))


class FilteredUnigram(NGramStrategy):
    """Unigrams without short words (articles, prepositions, ...)."""
    name = "filtered_unigram"

    def __init__(self, min_word_length=None):
        self.min_word_length = min_word_length if min_word_length is not None else ClassifierConfig.FILTERED_MIN_WORD_LENGTH

    def words(self, text):
        return [w for w in split_words(text) if len(w) >= self.min_word_length]

    def get_ngram(self, text):
        return set(self.words(text))


class Bigram(NGramStrategy):
    """Pairs of adjacent words joined by a space."""
    name = "bigram"

    def words(self, text):
        return split_words(text)

    def get_ngram(self, text):
        words = self.words(text)
        return {f"{a} {b}" for a, b in zip(words, words[1:])}


class FilteredBigram(Bigram):
    name = "filtered_bigram"

    def __init__(self, min_word_length=None):
        self._filter = FilteredUnigram(min_word_length)

    def words(self, text):
        return self._filter.words(text)


class CharNGram(NGramStrategy):
    """
    Sliding window of n characters over the cleaned text.
    Texts shorter than n yield themselves as the only token.
    """
    name = "char"

    def __init__(self, n=None):
        self.n = n if n is not None else ClassifierConfig.CHAR_NGRAM_SIZE
        if self.n < 1:
            raise InvalidArgumentError(f"Character n-gram size must be positive, got {self.n}")

    def get_ngram(self, text):
        cleaned = " ".join(split_words(text))
        if not cleaned:
            return set()
        if len(cleaned) <= self.n:
            return {cleaned}
        return {cleaned[i:i + self.n] for i in range(len(cleaned) - self.n + 1)}

    def __repr__(self):
        return f"CharNGram(n={self.n})"


_STRATEGIES = {
    Unigram.name: Unigram,
    FilteredUnigram.name: FilteredUnigram,
    Bigram.name: Bigram,
    FilteredBigram.name: FilteredBigram,
    CharNGram.name: CharNGram,
}


def get_ngram_strategy(name=None):
    """
    Strategy by name: 'unigram', 'filtered_unigram', 'bigram', 'filtered_bigram',
    'char' or 'charN' (e.g. 'char4'). Defaults to ClassifierConfig.NGRAM_STRATEGY.
    """
    name = (name or ClassifierConfig.NGRAM_STRATEGY).lower()

    if name in _STRATEGIES:
        return _STRATEGIES[name]()

    match = re.fullmatch(r"char(\d+)", name)
    if match:
        return CharNGram(int(match.group(1)))

    raise InvalidArgumentError(f"Unknown n-gram strategy: {name}")
