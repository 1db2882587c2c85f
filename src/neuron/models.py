import logging
from typing import List, Optional, Sequence

import numpy as np

from neuron.errors import DimensionMismatchError
from neuron.layers import NeuronLayer
from neuron.propagation import (Adjustment, Deltas, Propagation, Target,
                                WeightedDeltas)

logger = logging.getLogger(__name__)


class Model:
    """Ordered stack of layers trained with plain per-sample gradient descent.

    The model owns its layers; layers never reference each other. The forward
    pass runs left to right, the backward pass right to left, with each
    layer's :class:`WeightedDeltas` becoming the previous layer's
    :class:`Deltas` adjustment.
    """

    def __init__(self,
                 layers: Sequence[NeuronLayer],
                 name: Optional[str] = None) -> None:
        if not layers:
            raise ValueError("A model needs at least one layer.")

        for i, (current, following) in enumerate(zip(layers, layers[1:])):
            if current.output_dim != following.input_dim:
                raise DimensionMismatchError(
                    f"Layer {i} ('{current.name}') outputs "
                    f"{current.output_dim} values but layer {i + 1} "
                    f"('{following.name}') expects {following.input_dim}.")

        self.name = name or self.__class__.__name__
        self.layers: List[NeuronLayer] = list(layers)

        logger.info("%s initialized with %d layer(s): %s.", self.name,
                    len(self.layers),
                    " -> ".join(str(layer.input_dim) for layer in self.layers)
                    + f" -> {self.layers[-1].output_dim}")

    @property
    def input_dim(self) -> int:
        return self.layers[0].input_dim

    @property
    def output_dim(self) -> int:
        return self.layers[-1].output_dim

    def predict(self, x: np.ndarray) -> np.ndarray:
        y = np.asarray(x, dtype=np.float64)

        for layer in self.layers:
            y = layer.propagate(y)

        return y

    def train_step(self, x: np.ndarray, target: np.ndarray,
                   learning_rate: float) -> float:
        """Run one forward and one backward pass on a single sample.

        Returns the terminal layer's total loss measured before the update.
        """
        target = np.asarray(target, dtype=np.float64)

        inputs: List[np.ndarray] = []
        outputs: List[np.ndarray] = []

        y = np.asarray(x, dtype=np.float64)
        for layer in self.layers:
            inputs.append(y)
            y = layer.propagate(y)
            outputs.append(y)

        terminal = self.layers[-1]
        loss_value = terminal.loss.total(target, outputs[-1])

        adjustment: Adjustment = Target(target)
        weighted_deltas: Optional[WeightedDeltas] = None

        for i in reversed(range(len(self.layers))):
            if weighted_deltas is not None:
                adjustment = Deltas(weighted_deltas)

            weighted_deltas = self.layers[i].backpropagate(
                Propagation(input=inputs[i],
                            output=outputs[i],
                            adjustment=adjustment,
                            learning_rate=learning_rate))

        logger.debug("%s train step: loss=%.6f, learning_rate=%g.", self.name,
                     loss_value, learning_rate)

        return loss_value
