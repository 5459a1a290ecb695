import os

from .config import ClassifierConfig
from .debug_utils import log_debug
from .errors import InvalidArgumentError
from .model import IncomingCall
from .observer import Observable
from .recognizer.recognizer import Recognizer


class Classifier(Observable):
    """
    One Recognizer per characteristic, trained and queried together.
    Observers added here receive the progress of every recognizer.
    """
    def __init__(self, characteristics, vocabulary, ngram_strategy, recognizers=None):
        super().__init__()
        if recognizers is None:
            if not characteristics:
                raise InvalidArgumentError("Classifier needs at least one characteristic")
            recognizers = [Recognizer(c, vocabulary, ngram_strategy) for c in characteristics]

        self.vocabulary = vocabulary
        self.ngram_strategy = ngram_strategy
        self.recognizers = list(recognizers)
        for recognizer in self.recognizers:
            recognizer.add_observer(self)

    @classmethod
    def load(cls, directory, characteristics, vocabulary, ngram_strategy):
        """Restores the recognizers written by save()."""
        recognizers = []
        for characteristic in characteristics:
            path = os.path.join(directory, characteristic.name + ClassifierConfig.SNAPSHOT_SUFFIX)
            recognizers.append(Recognizer.load(path, characteristic, vocabulary, ngram_strategy))
        return cls(characteristics, vocabulary, ngram_strategy, recognizers=recognizers)

    # Observer interface, fans recognizer progress out to our own observers
    def update(self, text):
        self.notify_observers(text)

    @property
    def characteristics(self):
        return [r.characteristic for r in self.recognizers]

    def train(self, incoming_calls, max_iterations=None):
        incoming_calls = list(incoming_calls)
        for recognizer in self.recognizers:
            recognizer.train(incoming_calls, max_iterations=max_iterations)

    def classify(self, text):
        """Returns {Characteristic: CharacteristicValue} for one text or IncomingCall."""
        if isinstance(text, IncomingCall):
            text = text.text
        return {r.characteristic: r.recognize(text) for r in self.recognizers}

    def save(self, directory):
        os.makedirs(directory, exist_ok=True)
        for recognizer in self.recognizers:
            recognizer.save(os.path.join(directory, str(recognizer)))
        log_debug(f"Saved {len(self.recognizers)} recognizers to {directory}")
