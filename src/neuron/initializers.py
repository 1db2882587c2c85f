import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class Initializer(ABC):

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or self.__class__.__name__

    @abstractmethod
    def initialize(self, shape: Tuple[int, ...]) -> np.ndarray:
        pass


class Zeros(Initializer):

    def initialize(self, shape: Tuple[int, ...]) -> np.ndarray:
        logger.debug("%s filling shape %s.", self.name, shape)

        return np.zeros(shape, dtype=np.float64)


class RandomUniform(Initializer):
    """Draws every entry independently from ``[low, high)``."""

    def __init__(self,
                 low: float = -0.05,
                 high: float = 0.05,
                 seed: Optional[int] = None,
                 name: Optional[str] = None) -> None:
        super().__init__(name)

        if not low < high:
            raise ValueError(
                f"Lower bound ({low}) must be below upper bound ({high}).")

        self.bounds = (low, high)
        self._rng = np.random.default_rng(seed)

        logger.info("%s ready: bounds=[%g, %g), seed=%s.", self.name, low,
                    high, seed)

    def initialize(self, shape: Tuple[int, ...]) -> np.ndarray:
        low, high = self.bounds

        return self._rng.uniform(low, high, size=shape)


class GlorotUniform(Initializer):
    """Glorot uniform for weights laid out as (output_dim, input_dim)."""

    def __init__(self,
                 seed: Optional[int] = None,
                 name: Optional[str] = None) -> None:
        super().__init__(name)
        self._rng = np.random.default_rng(seed)

    def initialize(self, shape: Tuple[int, ...]) -> np.ndarray:
        if len(shape) != 2:
            raise ValueError("GlorotUniform requires a 2D shape, "
                             f"got {len(shape)}D.")

        fan_out, fan_in = shape
        limit = np.sqrt(6.0 / (fan_in + fan_out))

        logger.debug("%s drawing %s with fan_in=%d, fan_out=%d, limit=%.4f.",
                     self.name, shape, fan_in, fan_out, limit)

        return self._rng.uniform(-limit, limit, size=shape)
