class ClassifierError(Exception):
    """Base class for every error raised by nntextclassifier."""


class InvalidArgumentError(ClassifierError, ValueError):
    """Missing or malformed construction input."""


class CorruptModelError(ClassifierError):
    """A saved network could not be read or does not fit the recognizer."""


class DecodeMismatchError(ClassifierError):
    """
    The network picked an output coordinate that no characteristic value owns.
    Means the value ids and the output layer disagree; never map it to a default.
    """


class RuntimeShutdownError(ClassifierError, RuntimeError):
    """Training or inference attempted after runtime.shutdown()."""


class DidNotConvergeError(ClassifierError):
    """Training hit its iteration ceiling before the error fell below the threshold."""

    def __init__(self, characteristic_name, iterations, error):
        self.characteristic_name = characteristic_name
        self.iterations = iterations
        self.error = error
        super().__init__(
            f"Recognizer for '{characteristic_name}' did not converge after "
            f"{iterations} iterations (error {error * 100:.2f}%)"
        )
