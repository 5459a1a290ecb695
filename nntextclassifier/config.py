# Configuration for the text classifier

class ClassifierConfig:
    # Network
    HIDDEN_LAYER_DIVISOR = 2  # hidden = input // 2

    # Training
    CONVERGENCE_THRESHOLD = 0.01  # 1% mean squared error
    MAX_ITERATIONS = None         # None = train until converged
    THREAD_COUNT = 16

    # Resilient propagation step sizes
    RPROP_INITIAL_UPDATE = 0.1
    RPROP_ETAS = (0.5, 1.2)
    RPROP_STEP_SIZES = (1e-6, 50.0)

    # Text
    NGRAM_STRATEGY = "unigram"
    FILTERED_MIN_WORD_LENGTH = 3
    CHAR_NGRAM_SIZE = 3
    VOCABULARY_MIN_OCCURRENCES = 2

    # Persistence
    SNAPSHOT_FORMAT_VERSION = 1
    SNAPSHOT_SUFFIX = "RecognizerNeuralNetwork"

    # Diagnostics
    TENSORBOARD_LOG_DIR = None  # e.g. 'runs/recognizers'
    LOG_FILE = None
