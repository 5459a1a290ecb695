import torch
import torch.optim as optim
from torch.utils.tensorboard import SummaryWriter

from .. import runtime
from ..config import ClassifierConfig
from ..debug_utils import logger
from ..errors import DidNotConvergeError, InvalidArgumentError, RuntimeShutdownError


class TrainingState:
    IDLE = "idle"
    ITERATING = "iterating"
    CONVERGED = "converged"
    FINALIZED = "finalized"
    DID_NOT_CONVERGE = "did_not_converge"


class RpropTrainer:
    """
    Full-batch resilient propagation.

    Each iteration splits the batch into shards, computes the squared-error
    gradients of every shard on the runtime worker pool, sums them and applies
    one Rprop step. The reported error is the mean squared error over all
    outputs of all rows, measured with the weights before the step.
    """
    def __init__(self, network, inputs, ideal, thread_count=None, log_dir=None, name="recognizer"):
        if len(inputs) == 0:
            raise InvalidArgumentError("Training needs at least one example")
        if len(inputs) != len(ideal):
            raise InvalidArgumentError(f"{len(inputs)} input rows but {len(ideal)} ideal rows")

        self.network = network
        self.name = name
        self.inputs = torch.as_tensor(inputs, dtype=torch.float32)
        self.ideal = torch.as_tensor(ideal, dtype=torch.float32)

        self.thread_count = thread_count or runtime.get_thread_count()
        n_shards = max(1, min(self.thread_count, self.inputs.shape[0]))
        self._shards = list(zip(
            torch.tensor_split(self.inputs, n_shards),
            torch.tensor_split(self.ideal, n_shards)
        ))

        self._params = [p for p in self.network.parameters() if p.requires_grad]
        self.optimizer = optim.Rprop(
            self._params,
            lr=ClassifierConfig.RPROP_INITIAL_UPDATE,
            etas=ClassifierConfig.RPROP_ETAS,
            step_sizes=ClassifierConfig.RPROP_STEP_SIZES
        )

        log_dir = log_dir or ClassifierConfig.TENSORBOARD_LOG_DIR
        self.writer = SummaryWriter(log_dir) if log_dir else None

        self.state = TrainingState.IDLE
        self.error = float('inf')
        self.iterations = 0

    def _shard_gradients(self, inputs, ideal):
        output = self.network(inputs)
        sse = ((output - ideal) ** 2).sum()
        # autograd.grad leaves .grad untouched, so shards can run side by side
        grads = torch.autograd.grad(sse, self._params)
        return sse.item(), grads

    def iteration(self):
        """One Rprop step over the full batch. Returns the error."""
        executor = runtime.get_executor()
        self.state = TrainingState.ITERATING
        self.network.train()

        try:
            futures = [executor.submit(self._shard_gradients, x, y) for x, y in self._shards]
        except RuntimeError as e:
            # Pool closed by runtime.shutdown() after we fetched it
            raise RuntimeShutdownError("Runtime was shut down during training") from e

        total_sse = 0.0
        summed = None
        for future in futures:
            sse, grads = future.result()
            total_sse += sse
            summed = list(grads) if summed is None else [s + g for s, g in zip(summed, grads)]

        n_values = self.ideal.numel()
        for param, grad in zip(self._params, summed):
            param.grad = grad / n_values
        self.optimizer.step()

        self.error = total_sse / n_values
        self.iterations += 1

        if self.writer:
            self.writer.add_scalar(f"{self.name}/error", self.error, self.iterations)

        return self.error

    def train(self, on_iteration=None, threshold=None, max_iterations=None):
        """
        Iterates until error <= threshold.

        Args:
            on_iteration: callable(iteration, error), called after every step
            threshold: defaults to ClassifierConfig.CONVERGENCE_THRESHOLD
            max_iterations: optional ceiling; None trains until convergence

        Raises:
            DidNotConvergeError: ceiling reached first
        """
        if threshold is None:
            threshold = ClassifierConfig.CONVERGENCE_THRESHOLD
        if max_iterations is None:
            max_iterations = ClassifierConfig.MAX_ITERATIONS

        try:
            while True:
                error = self.iteration()
                if on_iteration:
                    on_iteration(self.iterations, error)

                if error <= threshold:
                    self.state = TrainingState.CONVERGED
                    break

                if max_iterations is not None and self.iterations >= max_iterations:
                    self.state = TrainingState.DID_NOT_CONVERGE
                    raise DidNotConvergeError(self.name, self.iterations, error)
        finally:
            self.finish_training()

        logger.info(f"'{self.name}' converged after {self.iterations} iterations, error {self.error:.6f}")
        return self.error

    def finish_training(self):
        """Drops optimizer state and closes the metrics writer."""
        self.optimizer.zero_grad(set_to_none=True)
        self.optimizer.state.clear()
        self.network.eval()
        if self.writer:
            self.writer.close()
            self.writer = None
        if self.state == TrainingState.CONVERGED:
            self.state = TrainingState.FINALIZED
