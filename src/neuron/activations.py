import logging
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)


class Activation(Enum):
    SIGMOID = "sigmoid"
    RECTIFIED_LINEAR_UNIT = "relu"
    SOFTPLUS = "softplus"

    @classmethod
    def from_name(cls, name: str) -> "Activation":
        key = name.strip().lower()

        for activation in cls:
            if key in (activation.value, activation.name.lower()):
                return activation

        raise ValueError(
            f"Unknown activation '{name}'. Expected one of "
            f"{[activation.value for activation in cls]}.")

    def apply(self, x: np.ndarray) -> np.ndarray:
        if self is Activation.SIGMOID:
            e = np.exp(-np.abs(x))
            y = np.where(x >= 0, 1.0 / (1.0 + e), e / (1.0 + e))
        elif self is Activation.RECTIFIED_LINEAR_UNIT:
            y = np.maximum(x, 0.0)
        else:
            y = np.logaddexp(0.0, x)

        logger.debug("%s apply: input_shape=%s, output_shape=%s.", self.name,
                     x.shape, y.shape)

        return y

    def derivative(self, y: np.ndarray) -> np.ndarray:
        """Local derivative expressed in terms of the activated output `y`.

        The pre-activation vector is never retained, so every formula here
        takes what `apply` returned rather than its argument.
        """
        if self is Activation.SIGMOID:
            dy_dz = y * (1.0 - y)
        elif self is Activation.RECTIFIED_LINEAR_UNIT:
            dy_dz = np.maximum(np.sign(y), 0.0)
        else:
            dy_dz = 1.0 / (1.0 + np.exp(-y))

        logger.debug("%s derivative: y_shape=%s.", self.name, y.shape)

        return dy_dz
