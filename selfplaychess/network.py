"""A fully connected feed-forward network trained by backpropagation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from selfplaychess.matrix import Activation, Matrix


class NeuralNetwork:
    """Sigmoid hidden layers followed by a softmax output layer."""

    def __init__(
        self,
        input_size: int,
        output_size: int,
        hidden_sizes: Sequence[int] = (),
        rng: np.random.Generator | None = None,
    ) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        self.input_size = input_size
        self.output_size = output_size

        layer_sizes = [input_size, *hidden_sizes, output_size]
        self.layer_count = len(layer_sizes) - 1

        self.weights: list[Matrix] = []
        self.biases: list[Matrix] = []
        self.activations: list[Activation] = []
        for index, (fan_in, fan_out) in enumerate(zip(layer_sizes, layer_sizes[1:])):
            weights = Matrix(fan_out, fan_in)
            weights.data[:] = rng.uniform(-1.0, 1.0, size=(fan_out, fan_in))
            biases = Matrix(fan_out, 1)
            biases.data[:] = rng.uniform(-1.0, 1.0, size=(fan_out, 1))
            self.weights.append(weights)
            self.biases.append(biases)
            self.activations.append(
                Activation.SOFTMAX if index == self.layer_count - 1 else Activation.SIGMOID
            )

    @staticmethod
    def _as_matrix(inputs: Matrix | Sequence[float]) -> Matrix:
        return inputs if isinstance(inputs, Matrix) else Matrix.from_vector(inputs)

    def forward_layers(self, inputs: Matrix | Sequence[float]) -> list[Matrix]:
        """Return the activated output of every layer, the last being the prediction."""
        a = self._as_matrix(inputs)
        outputs = []
        for weights, biases, activation in zip(self.weights, self.biases, self.activations):
            z = (weights @ a) + biases
            a = z.sigmoid() if activation is Activation.SIGMOID else z.softmax()
            outputs.append(a)
        return outputs

    def forward(self, inputs: Matrix | Sequence[float]) -> Matrix:
        """Run the network on a column vector and return its output."""
        layers = self.forward_layers(inputs)
        return layers[-1] if layers else self._as_matrix(inputs)

    def backprop(
        self,
        inputs: Matrix | Sequence[float],
        target: Matrix | Sequence[float],
        learning_rate: float,
    ) -> None:
        """Do one gradient step on a single sample."""
        inputs = self._as_matrix(inputs)
        target = self._as_matrix(target)
        cache = self.forward_layers(inputs)

        deltas: list[Matrix] = [Matrix()] * self.layer_count
        # Softmax with cross-entropy: delta = prediction - target.
        deltas[-1] = cache[-1] + target * -1.0
        for i in range(self.layer_count - 2, -1, -1):
            derivative = cache[i].sigmoid_derivative()
            deltas[i] = (self.weights[i + 1].transpose() @ deltas[i + 1]).hadamard(derivative)

        layer_inputs = [inputs, *cache[:-1]]
        for weights, biases, delta, a_input in zip(
            self.weights, self.biases, deltas, layer_inputs
        ):
            gradient = delta @ a_input.transpose()
            weights.data -= learning_rate * gradient.data
            biases.data -= learning_rate * delta.data