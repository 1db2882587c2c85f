import logging
from typing import Dict, Optional

import numpy as np

from neuron.activations import Activation
from neuron.errors import DimensionMismatchError
from neuron.initializers import GlorotUniform, Initializer, Zeros
from neuron.losses import LossFunction
from neuron.propagation import Deltas, Propagation, Target, WeightedDeltas

logger = logging.getLogger(__name__)


class NeuronLayer:
    """Affine transform followed by an elementwise activation.

    The weight matrix has shape ``(output_dim, input_dim)`` so that the net
    input is ``weights @ x + bias``. The loss function is only consulted when
    the layer is the terminal layer of a network, i.e. when it is handed a
    :class:`Target` adjustment.

    By default only the weights are trained and the bias stays at its initial
    value. Pass ``update_bias=True`` to apply the bias gradient as well.
    """

    def __init__(self,
                 weights: np.ndarray,
                 bias: np.ndarray,
                 activation: Activation = Activation.SIGMOID,
                 loss: LossFunction = LossFunction.SQUARED_ERROR,
                 update_bias: bool = False,
                 name: Optional[str] = None) -> None:
        self.name = name or self.__class__.__name__

        W = np.array(weights, dtype=np.float64)
        b = np.array(bias, dtype=np.float64)

        if W.ndim != 2:
            raise DimensionMismatchError(
                "Weights shape mismatch. Expected 2D array, got "
                f"{W.ndim}D array with shape {W.shape}.")

        if b.ndim != 1:
            raise DimensionMismatchError(
                "Bias shape mismatch. Expected 1D array, got "
                f"{b.ndim}D array with shape {b.shape}.")

        if b.shape[0] != W.shape[0]:
            raise DimensionMismatchError(
                f"Bias length ({b.shape[0]}) does not match the output "
                f"dimension of the weights ({W.shape[0]}).")

        if W.size == 0:
            raise DimensionMismatchError(
                f"Weights must not be empty, got shape {W.shape}.")

        self.activation = activation
        self.loss = loss
        self.update_bias = update_bias

        self._W = W
        self._b = b

        if self.loss is LossFunction.CROSS_ENTROPY:
            logger.warning(
                "%s uses %s, which has no implementation. The layer can only "
                "be trained through Deltas adjustments, never as a terminal "
                "layer.", self.name, self.loss.name)

        logger.info(
            "%s initialized with input_dim=%d, output_dim=%d, "
            "activation=%s, loss=%s, update_bias=%s.", self.name,
            self.input_dim, self.output_dim, self.activation.name,
            self.loss.name, self.update_bias)

    @classmethod
    def create(cls,
               input_dim: int,
               output_dim: int,
               activation: Activation = Activation.SIGMOID,
               loss: LossFunction = LossFunction.SQUARED_ERROR,
               weights_initializer: Optional[Initializer] = None,
               bias_initializer: Optional[Initializer] = None,
               update_bias: bool = False,
               name: Optional[str] = None) -> "NeuronLayer":
        if input_dim <= 0:
            raise ValueError(
                f"Input dimension must be positive, got {input_dim}.")

        if output_dim <= 0:
            raise ValueError(
                f"Output dimension must be positive, got {output_dim}.")

        weights_initializer = weights_initializer or GlorotUniform()
        bias_initializer = bias_initializer or Zeros()

        return cls(weights_initializer.initialize((output_dim, input_dim)),
                   bias_initializer.initialize((output_dim, )),
                   activation=activation,
                   loss=loss,
                   update_bias=update_bias,
                   name=name)

    @property
    def input_dim(self) -> int:
        return self._W.shape[1]

    @property
    def output_dim(self) -> int:
        return self._W.shape[0]

    @property
    def weights(self) -> np.ndarray:
        return self._W

    @property
    def bias(self) -> np.ndarray:
        return self._b

    @property
    def params(self) -> Dict[str, np.ndarray]:
        return {"weights": self._W, "bias": self._b}

    def propagate(self, x: np.ndarray) -> np.ndarray:
        x = self._as_vector(x, "Input", self.input_dim)

        z = self._W @ x + self._b
        y = self.activation.apply(z)

        logger.debug("%s forward pass: input_shape=%s, output_shape=%s.",
                     self.name, x.shape, y.shape)

        return y

    def backpropagate(self, propagation: Propagation) -> WeightedDeltas:
        x = self._as_vector(propagation.input, "Input", self.input_dim)
        y = self._as_vector(propagation.output, "Output", self.output_dim)

        adjustment = propagation.adjustment
        if isinstance(adjustment, Target):
            target = self._as_vector(adjustment.values, "Target",
                                     self.output_dim)
            dL_dy = self.loss.derivative(target, y)
        elif isinstance(adjustment, Deltas):
            dL_dy = self._as_vector(adjustment.weighted_deltas.values,
                                    "Deltas", self.output_dim)
        else:
            raise TypeError("Adjustment must be a Target or Deltas, got "
                            f"{type(adjustment).__name__}.")

        deltas = dL_dy * self.activation.derivative(y)

        upstream = self._W.T @ deltas
        dL_dW = np.outer(deltas, x)

        self._W -= propagation.learning_rate * dL_dW
        if self.update_bias:
            self._b -= propagation.learning_rate * deltas

        logger.debug(
            "%s backward pass: adjustment=%s, deltas_shape=%s, "
            "upstream_shape=%s, learning_rate=%g.", self.name,
            type(adjustment).__name__, deltas.shape, upstream.shape,
            propagation.learning_rate)

        return WeightedDeltas(upstream)

    @staticmethod
    def _as_vector(values: np.ndarray, label: str, length: int) -> np.ndarray:
        v = np.asarray(values, dtype=np.float64)

        if v.ndim != 1:
            raise DimensionMismatchError(
                f"{label} shape mismatch. Expected 1D array, got {v.ndim}D "
                f"array with shape {v.shape}.")

        if v.shape[0] != length:
            raise DimensionMismatchError(
                f"{label} length mismatch. Expected {length}, got "
                f"{v.shape[0]}.")

        return v
