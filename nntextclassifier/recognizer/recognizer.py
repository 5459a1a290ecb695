import torch

from .. import runtime
from ..config import ClassifierConfig
from ..debug_utils import log_debug, logger
from ..errors import CorruptModelError, InvalidArgumentError
from ..observer import Observable
from .encoding import CategoryCodec, TextVectorizer
from .network import FeedForwardNetwork
from .trainer import RpropTrainer


class Recognizer(Observable):
    """
    Neural network recognizer for one characteristic.

    input layer  <- vocabulary size (binary bag of n-grams)
    output layer <- number of possible characteristic values (one-hot)
    """
    def __init__(self, characteristic, vocabulary, ngram_strategy, trained_network=None):
        super().__init__()

        if characteristic is None or \
                not characteristic.name or \
                not characteristic.possible_values or \
                vocabulary is None or \
                vocabulary.size() == 0 or \
                ngram_strategy is None:
            raise InvalidArgumentError(
                "Recognizer needs a named characteristic with values, a non-empty vocabulary and an n-gram strategy"
            )

        self.characteristic = characteristic
        self.vocabulary = vocabulary
        self.ngram_strategy = ngram_strategy
        self.input_layer_size = vocabulary.size()
        self.output_layer_size = len(characteristic.possible_values)

        self.vectorizer = TextVectorizer(vocabulary, ngram_strategy)
        self.codec = CategoryCodec(characteristic)

        if trained_network is None:
            self.network = self._create_network()
        else:
            self.network = self._load_network(trained_network)
        self.network.eval()

    @classmethod
    def load(cls, trained_network, characteristic, vocabulary, ngram_strategy):
        """Restore a recognizer saved with save()."""
        return cls(characteristic, vocabulary, ngram_strategy, trained_network=trained_network)

    def _create_network(self):
        network = FeedForwardNetwork(self.input_layer_size, self.output_layer_size)
        log_debug(f"Created network {network.layer_sizes} for '{self.characteristic.name}'")
        return network

    def _load_network(self, source):
        try:
            # Snapshots hold only tensors and plain python values
            snapshot = torch.load(source, map_location='cpu', weights_only=True)
        except Exception as e:
            raise CorruptModelError(f"Cannot read network for '{self.characteristic.name}': {e}") from e

        if not isinstance(snapshot, dict) or 'model_state_dict' not in snapshot:
            raise CorruptModelError("Snapshot format invalid")

        version = snapshot.get('format_version')
        if version != ClassifierConfig.SNAPSHOT_FORMAT_VERSION:
            raise CorruptModelError(f"Unsupported snapshot version: {version}")

        layer_sizes = snapshot.get('layer_sizes')
        if not isinstance(layer_sizes, (list, tuple)) or len(layer_sizes) != 3:
            raise CorruptModelError(f"Snapshot layer sizes invalid: {layer_sizes}")

        try:
            input_size, hidden_size, output_size = (int(s) for s in layer_sizes)
        except (TypeError, ValueError) as e:
            raise CorruptModelError(f"Snapshot layer sizes invalid: {layer_sizes}") from e
        if hidden_size < 1:
            raise CorruptModelError(f"Snapshot hidden layer size {hidden_size} is not positive")
        if input_size != self.input_layer_size:
            raise CorruptModelError(
                f"Snapshot input layer {input_size} != vocabulary size {self.input_layer_size}"
            )
        if output_size != self.output_layer_size:
            raise CorruptModelError(
                f"Snapshot output layer {output_size} != {self.output_layer_size} values "
                f"of '{self.characteristic.name}'"
            )

        try:
            network = FeedForwardNetwork(input_size, output_size, hidden_size=hidden_size)
            network.load_state_dict(snapshot['model_state_dict'])
        except (RuntimeError, KeyError, TypeError, ValueError) as e:
            raise CorruptModelError(f"Size mismatch in snapshot: {e}") from e

        saved_name = snapshot.get('characteristic')
        if saved_name != self.characteristic.name:
            logger.warning(f"Snapshot was trained for '{saved_name}', loading into '{self.characteristic.name}'")

        log_debug(f"Loaded network {network.layer_sizes} for '{self.characteristic.name}'")
        return network

    def vectorize(self, text):
        return self.vectorizer.vectorize(text)

    def recognize(self, text):
        """
        Predicts the characteristic value of a text (or IncomingCall).
        Read-only on the weights; do not call while train() is running.
        """
        runtime.ensure_running()
        output = self.network.compute(self.vectorize(text))
        return self.codec.decode(output)

    def train(self, incoming_calls, max_iterations=None, threshold=None, log_dir=None):
        """
        Trains until the mean squared error drops to the convergence threshold.

        input <- IncomingCall text vector
        ideal <- characteristic value vector
        """
        runtime.ensure_running()
        incoming_calls = list(incoming_calls)
        name = self.characteristic.name

        inputs = self.vectorizer.vectorize_all([call.text for call in incoming_calls])
        ideal = self.codec.encode_all(incoming_calls)

        trainer = RpropTrainer(self.network, inputs, ideal, log_dir=log_dir, name=name)

        def report(iteration, error):
            self.notify_observers(
                f"Training Recognizer for Characteristics '{name}'. Errors: {error * 100:.2f}%. Wait..."
            )

        trainer.train(on_iteration=report, threshold=threshold, max_iterations=max_iterations)
        self.notify_observers(f"Recognizer for Characteristics '{name}' trained. Wait...")
        return trainer

    def save(self, destination):
        """Writes the network to a path or binary file object."""
        torch.save({
            'format_version': ClassifierConfig.SNAPSHOT_FORMAT_VERSION,
            'characteristic': self.characteristic.name,
            'layer_sizes': self.network.layer_sizes,
            'model_state_dict': self.network.state_dict()
        }, destination)
        self.notify_observers(f"Trained Recognizer for Characteristics '{self.characteristic.name}' saved. Wait...")

    def __str__(self):
        return self.characteristic.name + ClassifierConfig.SNAPSHOT_SUFFIX
