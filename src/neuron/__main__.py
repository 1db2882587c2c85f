#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from neuron.activations import Activation
from neuron.initializers import GlorotUniform
from neuron.layers import NeuronLayer
from neuron.losses import LossFunction
from neuron.propagation import Propagation, Target

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = [[1.0, 2.0]]
DEFAULT_BIAS = [0.0]
DEFAULT_INPUT = [0.4, -0.1]
DEFAULT_TARGET = [0.3]
DEFAULT_ITERATIONS = 1000
DEFAULT_LEARNING_RATE = 1.0
DEFAULT_LOG_INTERVAL = 100


def train(layer: NeuronLayer, x: np.ndarray, target: np.ndarray,
          iterations: int, learning_rate: float,
          log_interval: int) -> np.ndarray:
    for i in range(iterations):
        output = layer.propagate(x)

        layer.backpropagate(
            Propagation(input=x,
                        output=output,
                        adjustment=Target(target),
                        learning_rate=learning_rate))

        if log_interval > 0 and (i + 1) % log_interval == 0:
            logger.info("Iteration %d/%d - Loss: %.6f.", i + 1, iterations,
                        layer.loss.total(target, output))

    return layer.propagate(x)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="neuron",
        description=("Train a single neuron layer towards a fixed target "
                     "with gradient descent."))

    parser.add_argument("--input",
                        type=float,
                        nargs="+",
                        default=DEFAULT_INPUT,
                        help="Input vector fed to the layer.")
    parser.add_argument("--target",
                        type=float,
                        nargs="+",
                        default=DEFAULT_TARGET,
                        help="Desired output vector.")
    parser.add_argument("--iterations",
                        type=int,
                        default=DEFAULT_ITERATIONS,
                        help="Number of forward/backward iterations.")
    parser.add_argument("--learning-rate",
                        type=float,
                        default=DEFAULT_LEARNING_RATE,
                        help="Gradient descent step size.")
    parser.add_argument("--activation",
                        type=Activation.from_name,
                        default=Activation.SIGMOID,
                        help="Activation: sigmoid, relu or softplus.")
    parser.add_argument("--log-interval",
                        type=int,
                        default=DEFAULT_LOG_INTERVAL,
                        help="Log the loss every N iterations (0 disables).")
    parser.add_argument("--update-bias",
                        action="store_true",
                        help="Also train the bias vector.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=("Initialize weights randomly with this seed instead of the "
              "fixed default weights."))
    parser.add_argument("--log-level",
                        default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity.")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format=("%(asctime)s - %(name)s - [%(levelname)s] - "
                                "%(message)s"))

    x = np.array(args.input, dtype=np.float64)
    target = np.array(args.target, dtype=np.float64)

    try:
        if args.seed is not None:
            layer = NeuronLayer.create(len(x),
                                       len(target),
                                       activation=args.activation,
                                       loss=LossFunction.SQUARED_ERROR,
                                       weights_initializer=GlorotUniform(
                                           seed=args.seed),
                                       update_bias=args.update_bias)
            logger.info("Using random seed: %d.", args.seed)
        else:
            layer = NeuronLayer(DEFAULT_WEIGHTS,
                                DEFAULT_BIAS,
                                activation=args.activation,
                                loss=LossFunction.SQUARED_ERROR,
                                update_bias=args.update_bias)

        logger.info(
            "Starting training with %d iterations, learning_rate=%g.",
            args.iterations, args.learning_rate)

        output = train(layer, x, target, args.iterations, args.learning_rate,
                       args.log_interval)
    except ValueError as e:
        logger.error("ValueError during training: %s", e, exc_info=True)
        return 1
    except NotImplementedError as e:
        logger.error("Unsupported operation: %s", e, exc_info=True)
        return 1

    logger.info("Training finished. Output: %s, target: %s, loss: %.6f.",
                np.array2string(output, precision=6),
                np.array2string(target, precision=6),
                layer.loss.total(target, output))

    return 0


if __name__ == "__main__":
    sys.exit(main())
