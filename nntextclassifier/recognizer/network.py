import torch
import torch.nn as nn

from ..config import ClassifierConfig


def hidden_layer_size(input_size):
    # Never zero, a one-word vocabulary still needs a hidden unit
    return max(1, input_size // ClassifierConfig.HIDDEN_LAYER_DIVISOR)


class FeedForwardNetwork(nn.Module):
    """
    Three layer perceptron: [input, input // 2, output].
    Input layer is a linear passthrough, hidden and output layers use sigmoid.
    Every layer is fully connected to the next one and carries a bias.
    """
    def __init__(self, input_size, output_size, hidden_size=None):
        super().__init__()
        self.input_size = input_size
        self.hidden_size = hidden_size or hidden_layer_size(input_size)
        self.output_size = output_size

        self.net = nn.Sequential(
            nn.Linear(self.input_size, self.hidden_size),
            nn.Sigmoid(),
            nn.Linear(self.hidden_size, self.output_size),
            nn.Sigmoid()
        )

    @property
    def layer_sizes(self):
        return [self.input_size, self.hidden_size, self.output_size]

    def forward(self, x):
        """
        Args:
            x: (Batch, InputSize) FloatTensor
        Returns:
            (Batch, OutputSize) values in (0, 1)
        """
        return self.net(x)

    def compute(self, vector):
        """Single forward pass for one input vector, no autograd."""
        with torch.no_grad():
            x = torch.as_tensor(vector, dtype=torch.float32).unsqueeze(0)
            return self.forward(x).squeeze(0).numpy()
