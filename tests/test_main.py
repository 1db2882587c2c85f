import logging

import pytest

from neuron.__main__ import main, parse_args
from neuron.activations import Activation


def test_parse_args_defaults():
    args = parse_args([])

    assert args.input == [0.4, -0.1]
    assert args.target == [0.3]
    assert args.iterations == 1000
    assert args.activation is Activation.SIGMOID
    assert not args.update_bias


def test_parse_args_activation_name():
    assert parse_args(["--activation", "relu"
                       ]).activation is Activation.RECTIFIED_LINEAR_UNIT


def test_main_trains_default_scenario(caplog):
    with caplog.at_level(logging.INFO):
        assert main(["--log-interval", "0"]) == 0

    assert "Training finished" in caplog.text


def test_main_with_random_weights():
    assert main([
        "--input", "1.0", "0.5", "0.25", "--target", "0.1", "0.9", "--seed",
        "3", "--iterations", "50", "--update-bias"
    ]) == 0


def test_main_reports_dimension_errors(caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["--input", "1.0", "2.0", "3.0"]) == 1

    assert "ValueError during training" in caplog.text


def test_main_rejects_non_positive_learning_rate():
    assert main(["--learning-rate", "0"]) == 1


def test_main_rejects_unknown_activation():
    with pytest.raises(SystemExit):
        parse_args(["--activation", "tanh"])
