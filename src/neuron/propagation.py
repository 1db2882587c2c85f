"""Values exchanged between a layer and whoever drives its backward pass."""

from dataclasses import dataclass
from typing import Union

import numpy as np


@dataclass(frozen=True, eq=False)
class WeightedDeltas:
    """Contribution of each of a layer's inputs to the downstream error."""

    values: np.ndarray

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True, eq=False)
class Target:
    """Desired output of the terminal layer."""

    values: np.ndarray


@dataclass(frozen=True, eq=False)
class Deltas:
    """Error signal handed back by the following layer."""

    weighted_deltas: WeightedDeltas


Adjustment = Union[Target, Deltas]


@dataclass(frozen=True, eq=False)
class Propagation:
    input: np.ndarray
    output: np.ndarray
    adjustment: Adjustment
    learning_rate: float

    def __post_init__(self) -> None:
        if not self.learning_rate > 0:
            raise ValueError(
                f"Learning rate must be positive, got {self.learning_rate}.")
