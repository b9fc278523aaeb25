"""A fully connected network with sigmoid hidden layers."""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .matrix import Matrix


def sigmoid(x: float) -> float:
    """The logistic function 1 / (1 + e^-x)."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def sigmoid_prime(x: float) -> float:
    """Derivative of the logistic function, given its output x."""
    return x * (1 - x)


def softmax(values: Iterable[float]) -> list[float]:
    """Return the softmax of the values, shifted by max(0, values) for stability."""
    data = [float(v) for v in values]
    peak = max([0.0, *data])
    exps = [math.exp(v - peak) for v in data]
    total = sum(exps)
    return [e / total for e in exps]


class Activation(Enum):
    """Activation of the output layer; the value is its name in save files."""

    SOFTMAX = "SoftMax"
    SIGMOID = "Sigmoid"

    def activate(self, values: Iterable[float]) -> list[float]:
        if self is Activation.SOFTMAX:
            return softmax(values)
        return [sigmoid(v) for v in values]

    def derivative(self, x: float) -> float:
        """Derivative of the activation, given its output x."""
        return sigmoid_prime(x)


class Network:
    """Input layer, `layers` sigmoid hidden layers of equal size, output layer.

    Weights are stored as matrices whose rows belong to the receiving layer.
    """

    def __init__(
        self,
        inputs: int,
        layers: int,
        hidden: int,
        outputs: int,
        activation: Activation = Activation.SOFTMAX,
        rng: Optional[random.Random] = None,
        randomise: bool = True,
    ) -> None:
        if layers < 1:
            raise ValueError(f"a network needs at least one hidden layer, got {layers}")
        self.activation = Activation(activation)

        def build(height: int, width: int) -> Matrix:
            matrix = Matrix(height, width)
            if randomise:
                matrix.randomise(rng)
            return matrix

        self.input = Matrix(inputs, 1)
        self.weight_ih = build(hidden, inputs)

        self.hiddens: List[Matrix] = []
        self.hidden_biases: List[Matrix] = []
        self.weight_hh: List[Matrix] = []
        for index in range(layers):
            self.hiddens.append(Matrix(hidden, 1))
            self.hidden_biases.append(build(hidden, 1))
            if index != layers - 1:
                self.weight_hh.append(build(hidden, hidden))

        self.weight_ho = build(outputs, hidden)
        self.output = Matrix(outputs, 1)
        self.output_bias = build(outputs, 1)

    @property
    def layers(self) -> int:
        return len(self.hiddens)

    @property
    def input_size(self) -> int:
        return self.input.height

    @property
    def hidden_size(self) -> int:
        return self.hiddens[0].height

    @property
    def output_size(self) -> int:
        return self.output.height

    def __repr__(self) -> str:
        return (
            f"Network(inputs={self.input_size}, layers={self.layers}, "
            f"hidden={self.hidden_size}, outputs={self.output_size}, "
            f"activation={self.activation})"
        )

    def set_input(self, values: Sequence[float]) -> None:
        """Load the input layer with exactly input_size values."""
        if len(values) != self.input_size:
            raise ValueError(
                f"expected {self.input_size} input values, got {len(values)}"
            )
        self.input.values = [float(v) for v in values]

    def feedforward(self) -> list[float]:
        """Propagate the input through the network; return the output values."""
        previous = self.input
        for index, (layer, bias) in enumerate(zip(self.hiddens, self.hidden_biases)):
            weights = self.weight_ih if index == 0 else self.weight_hh[index - 1]
            layer.values = [sigmoid(v) for v in (weights @ previous + bias).values]
            previous = layer
        total = self.weight_ho @ previous + self.output_bias
        self.output.values = self.activation.activate(total.values)
        return list(self.output.values)

    @staticmethod
    def _adjust(
        weights: list[float],
        row: int,
        width: int,
        step: float,
        sources: Sequence[float],
    ) -> None:
        start = row * width
        weights[start:start + width] = [
            w + step * s for w, s in zip(weights[start:start + width], sources)
        ]

    def backpropagation(self, expected: int, learning_rate: float) -> None:
        """Move every weight and bias towards the one-hot target `expected`."""
        out = self.output.values
        n_out = len(out)
        size = self.hidden_size
        last = self.layers - 1

        error_out = [
            self.activation.derivative(v) * ((1 if i == expected else 0) - v)
            for i, v in enumerate(out)
        ]

        errors: list[list[float]] = [[0.0] * size for _ in self.hiddens]
        w_ho = self.weight_ho.values
        errors[last] = [
            sigmoid_prime(h)
            * sum(w * e for w, e in zip(w_ho[i * n_out:(i + 1) * n_out], error_out))
            for i, h in enumerate(self.hiddens[last].values)
        ]
        for layer in range(last - 1, -1, -1):
            w_hh = self.weight_hh[layer].values
            following = errors[layer + 1]
            errors[layer] = [
                sigmoid_prime(h)
                * sum(w * e for w, e in zip(w_hh[i * size:(i + 1) * size], following))
                for i, h in enumerate(self.hiddens[layer].values)
            ]

        last_hidden = self.hiddens[last].values
        for i, err in enumerate(error_out):
            self._adjust(w_ho, i, size, learning_rate * err, last_hidden)
            self.output_bias.values[i] += learning_rate * err

        for layer in range(last, 0, -1):
            w_hh = self.weight_hh[layer - 1].values
            previous = self.hiddens[layer - 1].values
            bias = self.hidden_biases[layer].values
            for i, err in enumerate(errors[layer]):
                self._adjust(w_hh, i, size, learning_rate * err, previous)
                bias[i] += learning_rate * err

        w_ih = self.weight_ih.values
        inputs = self.input.values
        width = self.input_size
        bias = self.hidden_biases[0].values
        for i, err in enumerate(errors[0]):
            self._adjust(w_ih, i, width, learning_rate * err, inputs)
            bias[i] += learning_rate * err

    def cost(self, index: int) -> float:
        """Half the squared distance between the output and the one-hot target."""
        total = 0.0
        for i, value in enumerate(self.output.values):
            total += (value - (1 if i == index else 0)) ** 2
        return total / 2

    def result(self) -> int:
        """Index of the largest output; the last one among equals."""
        out = self.output.values
        best = 0
        for index, value in enumerate(out):
            if not out[best] > value:
                best = index
        return best