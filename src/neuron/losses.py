import logging
from enum import Enum
from typing import Tuple

import numpy as np

from neuron.errors import DimensionMismatchError, UnsupportedVariantError

logger = logging.getLogger(__name__)


class LossFunction(Enum):
    SQUARED_ERROR = "squared_error"
    CROSS_ENTROPY = "cross_entropy"

    @classmethod
    def from_name(cls, name: str) -> "LossFunction":
        key = name.strip().lower()

        for loss in cls:
            if key in (loss.value, loss.name.lower()):
                return loss

        raise ValueError(f"Unknown loss function '{name}'. Expected one of "
                         f"{[loss.value for loss in cls]}.")

    def error(self, target: np.ndarray, actual: np.ndarray) -> np.ndarray:
        target, actual = self._as_arrays(target, actual)
        self._check_shapes(target, actual)

        if self is LossFunction.CROSS_ENTROPY:
            raise UnsupportedVariantError(
                "Cross-entropy error is not implemented.")

        return (target - actual)**2 / 2.0

    def derivative(self, target: np.ndarray,
                   actual: np.ndarray) -> np.ndarray:
        target, actual = self._as_arrays(target, actual)
        self._check_shapes(target, actual)

        if self is LossFunction.CROSS_ENTROPY:
            raise UnsupportedVariantError(
                "Cross-entropy derivative is not implemented.")

        dL_dy = actual - target

        logger.debug("%s derivative: target_shape=%s, actual_shape=%s.",
                     self.name, target.shape, actual.shape)

        return dL_dy

    def total(self, target: np.ndarray, actual: np.ndarray) -> float:
        return float(np.sum(self.error(target, actual)))

    @staticmethod
    def _as_arrays(target: np.ndarray,
                   actual: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        return (np.asarray(target, dtype=np.float64),
                np.asarray(actual, dtype=np.float64))

    @staticmethod
    def _check_shapes(target: np.ndarray, actual: np.ndarray) -> None:
        if target.shape != actual.shape:
            raise DimensionMismatchError(
                f"Shape mismatch between target ({target.shape}) and "
                f"actual output ({actual.shape}). They must be identical.")
