from collections import Counter

from .config import ClassifierConfig
from .debug_utils import logger
from .errors import InvalidArgumentError
from .model import IncomingCall, Vocabulary, VocabularyWord


def build_vocabulary(records, ngram_strategy, min_occurrences=None):
    """
    Builds a Vocabulary from a corpus.

    Args:
        records: iterable of texts or IncomingCall objects.
        ngram_strategy: NGramStrategy deciding what a token is.
        min_occurrences: keep tokens found in at least this many records.

    Returns:
        Vocabulary with ids 1..N in first-seen order (alphabetical within a record).
    """
    if ngram_strategy is None:
        raise InvalidArgumentError("N-gram strategy is required")
    if min_occurrences is None:
        min_occurrences = ClassifierConfig.VOCABULARY_MIN_OCCURRENCES

    # Document frequency. Sorting each record keeps ids stable across runs
    counts = Counter()
    n_records = 0
    for record in records:
        text = record.text if isinstance(record, IncomingCall) else record
        counts.update(sorted(ngram_strategy.get_ngram(text)))
        n_records += 1

    kept = [token for token, count in counts.items() if count >= min_occurrences]
    if not kept:
        raise InvalidArgumentError(
            f"No token occurs in {min_occurrences} or more of {n_records} records"
        )

    logger.info(f"Vocabulary built: {len(kept)} of {len(counts)} tokens kept from {n_records} records")
    return Vocabulary(VocabularyWord(i, token) for i, token in enumerate(kept, start=1))
