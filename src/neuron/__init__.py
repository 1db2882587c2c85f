from neuron.activations import Activation
from neuron.errors import DimensionMismatchError, UnsupportedVariantError
from neuron.layers import NeuronLayer
from neuron.losses import LossFunction
from neuron.models import Model
from neuron.propagation import (Adjustment, Deltas, Propagation, Target,
                                WeightedDeltas)

__all__ = [
    "Activation", "Adjustment", "Deltas", "DimensionMismatchError",
    "LossFunction", "Model", "NeuronLayer", "Propagation", "Target",
    "UnsupportedVariantError", "WeightedDeltas"
]
