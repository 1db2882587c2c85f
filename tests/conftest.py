import numpy as np
import pytest

from neuron.activations import Activation
from neuron.layers import NeuronLayer
from neuron.losses import LossFunction


@pytest.fixture
def simple_layer() -> NeuronLayer:
    return NeuronLayer(np.array([[1.0, 2.0]]),
                       np.array([0.0]),
                       activation=Activation.SIGMOID,
                       loss=LossFunction.SQUARED_ERROR)


@pytest.fixture
def simple_input() -> np.ndarray:
    return np.array([0.4, -0.1])
