import unittest
import random
import sys
import os

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nntextclassifier.errors import DecodeMismatchError, InvalidArgumentError
from nntextclassifier.model import Characteristic, CharacteristicValue, IncomingCall
from nntextclassifier.ngram import NGramStrategy, Unigram
from nntextclassifier.recognizer.encoding import CategoryCodec, TextVectorizer
from fixtures import PURCHASE, SUPPORT, intent_characteristic, intent_vocabulary


class ShuffledUnigram(NGramStrategy):
    """Yields the same tokens as Unigram, in a random order."""
    def __init__(self, seed):
        self.rng = random.Random(seed)

    def get_ngram(self, text):
        tokens = sorted(Unigram().get_ngram(text))
        self.rng.shuffle(tokens)
        return tokens


class TestTextVectorizer(unittest.TestCase):

    def setUp(self):
        self.vectorizer = TextVectorizer(intent_vocabulary(), Unigram())

    def test_vector_is_binary_and_vocabulary_sized(self):
        for text in ["please buy now", "cancel my refund", "", "nothing known here", "buy buy buy"]:
            vector = self.vectorizer.vectorize(text)
            self.assertEqual(vector.shape, (3,))
            self.assertTrue(np.all((vector == 0.0) | (vector == 1.0)))

    def test_known_words_set_their_coordinate(self):
        np.testing.assert_array_equal(self.vectorizer.vectorize("Please BUY now"), [1, 0, 0])
        np.testing.assert_array_equal(self.vectorizer.vectorize("cancel my refund"), [0, 1, 1])
        np.testing.assert_array_equal(self.vectorizer.vectorize(None), [0, 0, 0])

    def test_accepts_incoming_call(self):
        np.testing.assert_array_equal(self.vectorizer.vectorize(IncomingCall("refund")), [0, 0, 1])

    def test_order_independent(self):
        text = "refund cancel buy and some other words"
        expected = self.vectorizer.vectorize(text)
        for seed in range(5):
            shuffled = TextVectorizer(intent_vocabulary(), ShuffledUnigram(seed))
            np.testing.assert_array_equal(shuffled.vectorize(text), expected)

    def test_vectorize_all(self):
        matrix = self.vectorizer.vectorize_all(["buy", "refund"])
        np.testing.assert_array_equal(matrix, [[1, 0, 0], [0, 0, 1]])


class TestCategoryCodec(unittest.TestCase):

    def setUp(self):
        self.characteristic = Characteristic("topic", [
            CharacteristicValue(1, "billing"),
            CharacteristicValue(2, "delivery"),
            CharacteristicValue(3, "other"),
        ])
        self.codec = CategoryCodec(self.characteristic)

    def test_encode_one_hot(self):
        np.testing.assert_array_equal(self.codec.encode(CharacteristicValue(2, "delivery")), [0, 1, 0])

    def test_round_trip(self):
        for value in self.characteristic.possible_values:
            self.assertEqual(self.codec.decode(self.codec.encode(value)), value)

    def test_tie_goes_to_lowest_id(self):
        self.assertEqual(self.codec.decode([0.5, 0.5, 0.2]).value, "billing")
        self.assertEqual(self.codec.decode([0.1, 0.7, 0.7]).value, "delivery")

    def test_encode_rejects_missing_or_out_of_range_value(self):
        with self.assertRaises(InvalidArgumentError):
            self.codec.encode(None)
        with self.assertRaises(InvalidArgumentError):
            self.codec.encode(CharacteristicValue(4, "unknown"))

    def test_encode_call(self):
        codec = CategoryCodec(intent_characteristic())
        call = IncomingCall("cancel", {intent_characteristic(): SUPPORT})
        np.testing.assert_array_equal(codec.encode_call(call), [0, 1])
        np.testing.assert_array_equal(
            codec.encode_all([call, IncomingCall("buy", {intent_characteristic(): PURCHASE})]),
            [[0, 1], [1, 0]]
        )

    def test_decode_mismatch(self):
        # ids 1 and 3, so output coordinate 2 has no owner
        broken = Characteristic("broken", [CharacteristicValue(1, "a"), CharacteristicValue(3, "c")])
        with self.assertRaises(DecodeMismatchError):
            CategoryCodec(broken).decode([0.1, 0.9])


if __name__ == '__main__':
    unittest.main()
