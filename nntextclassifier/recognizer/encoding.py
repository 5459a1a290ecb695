import numpy as np

from ..debug_utils import log_error
from ..errors import DecodeMismatchError, InvalidArgumentError
from ..model import IncomingCall


class TextVectorizer:
    """
    Binary bag of tokens: 1.0 at (word.id - 1) for every extracted token found
    in the vocabulary. Unknown tokens are ignored.
    """
    def __init__(self, vocabulary, ngram_strategy):
        self.vocabulary = vocabulary
        self.ngram_strategy = ngram_strategy
        self.size = vocabulary.size()

    def vectorize(self, text):
        if isinstance(text, IncomingCall):
            text = text.text

        vector = np.zeros(self.size, dtype=np.float32)
        for token in self.ngram_strategy.get_ngram(text):
            word = self.vocabulary.find(token)
            if word is not None:
                vector[word.id - 1] = 1.0
        return vector

    def vectorize_all(self, texts):
        """(N, VocabularySize) matrix, one row per text."""
        matrix = np.zeros((len(texts), self.size), dtype=np.float32)
        for i, text in enumerate(texts):
            matrix[i] = self.vectorize(text)
        return matrix


class CategoryCodec:
    """
    One-hot encoding of a characteristic's values and arg-max decoding back.

    example:
    count = 5; id = 4;
    vector = [0, 0, 0, 1, 0]
    """
    def __init__(self, characteristic):
        self.characteristic = characteristic
        self.size = len(characteristic.possible_values)

    def encode(self, value):
        if value is None:
            raise InvalidArgumentError(f"No value for characteristic '{self.characteristic.name}'")
        if not 1 <= value.id <= self.size:
            raise InvalidArgumentError(
                f"Value id {value.id} of '{self.characteristic.name}' is outside 1..{self.size}"
            )
        vector = np.zeros(self.size, dtype=np.float32)
        vector[value.id - 1] = 1.0
        return vector

    def encode_call(self, incoming_call):
        return self.encode(incoming_call.get_characteristic_value(self.characteristic))

    def encode_all(self, incoming_calls):
        matrix = np.zeros((len(incoming_calls), self.size), dtype=np.float32)
        for i, call in enumerate(incoming_calls):
            matrix[i] = self.encode_call(call)
        return matrix

    def decode(self, output):
        # np.argmax returns the first maximum, so ties go to the lowest id
        value_id = int(np.argmax(np.asarray(output))) + 1

        value = self.characteristic.find_value(value_id)
        if value is None:
            msg = f"Output id {value_id} has no value in characteristic '{self.characteristic.name}'"
            log_error(msg)
            raise DecodeMismatchError(msg)
        return value
