import sys

import numpy as np
import pytest

from feedforward import (
    BuilderFinalized,
    DimensionMismatch,
    DimensionsTooLarge,
    EmptyNetwork,
    Matrix,
    NeuralNetwork,
    NeuralNetworkBuilder,
)
from feedforward import config


def test_builder_new():
    builder = NeuralNetworkBuilder(5)

    assert builder.input_size == 5
    assert builder.hidden_layer_sizes == []


def test_builder_add_hidden_layer_keeps_order():
    builder = NeuralNetworkBuilder(5)

    assert builder.add_hidden_layer(7) is builder
    builder.add_hidden_layer(3)
    assert builder.input_size == 5
    assert builder.hidden_layer_sizes == [7, 3]


@pytest.mark.parametrize("nodes", [0, -3])
def test_builder_rejects_non_positive_sizes(nodes):
    with pytest.raises(ValueError):
        NeuralNetworkBuilder(nodes)
    with pytest.raises(ValueError):
        NeuralNetworkBuilder(3).add_hidden_layer(nodes)
    with pytest.raises(ValueError):
        NeuralNetworkBuilder(3).add_output_layer(nodes)


def test_output_layer_only(rng):
    network = NeuralNetworkBuilder(3).add_output_layer(2, rng)

    assert len(network) == 1
    assert network.layers[0].shape == (2, 3)
    assert network.get_number_of_inputs() == 3
    assert network.get_number_of_outputs() == 2


def test_hidden_and_output_layers(rng):
    network = NeuralNetworkBuilder(3).add_hidden_layer(4).add_output_layer(2, rng)

    assert [layer.shape for layer in network.layers] == [(4, 3), (2, 4)]
    assert network.get_layer_sizes() == [3, 4, 2]

    prediction = network.predict(Matrix.from_slice(3, 1, [1.0, 1.1, 1.2]))
    assert prediction.shape == (2, 1)


def test_weights_are_within_random_range(rng):
    network = (
        NeuralNetworkBuilder(5)
        .add_hidden_layer(7)
        .add_hidden_layer(3)
        .add_output_layer(2, rng)
    )

    assert [layer.shape for layer in network.layers] == [(7, 5), (3, 7), (2, 3)]
    for layer in network.layers:
        for value in layer.as_slice():
            assert 0.0 <= value <= 1.0


def test_seeded_builders_produce_same_network():
    first = NeuralNetworkBuilder(3).add_hidden_layer(4).add_output_layer(2, np.random.default_rng(7))
    second = NeuralNetworkBuilder(3).add_hidden_layer(4).add_output_layer(2, np.random.default_rng(7))

    assert first.layers == second.layers


def test_builder_with_callable_rng():
    network = NeuralNetworkBuilder(3).add_output_layer(2, lambda: 1)

    prediction = network.predict(Matrix.from_slice(3, 1, [1, 2, 3]))
    assert prediction == Matrix.from_slice(2, 1, [6, 6])


def test_builder_cannot_be_reused(rng):
    builder = NeuralNetworkBuilder(3).add_hidden_layer(4)
    builder.add_output_layer(2, rng)

    with pytest.raises(BuilderFinalized):
        builder.add_output_layer(2, rng)
    with pytest.raises(BuilderFinalized):
        builder.add_hidden_layer(4)


def test_builder_dimensions_too_large():
    with pytest.raises(DimensionsTooLarge):
        NeuralNetworkBuilder(sys.maxsize).add_output_layer(2)


def test_failed_build_leaves_builder_usable(monkeypatch, rng):
    builder = NeuralNetworkBuilder(3).add_hidden_layer(4)

    monkeypatch.setattr(config, "MAX_LENGTH", 10)
    with pytest.raises(DimensionsTooLarge):
        builder.add_output_layer(2, rng)

    monkeypatch.setattr(config, "MAX_LENGTH", sys.maxsize)
    network = builder.add_output_layer(2, rng)
    assert network.get_layer_sizes() == [3, 4, 2]


def test_network_without_layers():
    with pytest.raises(EmptyNetwork):
        NeuralNetwork([])


def test_network_layers_must_chain():
    with pytest.raises(DimensionMismatch):
        NeuralNetwork([Matrix(4, 3, 1.0), Matrix(2, 5, 1.0)])


def test_predict_with_known_weights():
    network = NeuralNetwork(
        [
            Matrix.from_slice(2, 3, [1, 2, 3, 4, 5, 6]),
            Matrix.from_slice(1, 2, [1, -1]),
        ]
    )

    prediction = network.predict(Matrix.from_slice(3, 1, [1, 1, 1]))
    assert prediction == Matrix.from_slice(1, 1, [-9])


def test_predict_chains_matrix_products(rng):
    network = NeuralNetworkBuilder(3).add_hidden_layer(5).add_hidden_layer(4).add_output_layer(2, rng)
    input = Matrix.from_slice(3, 1, [1.0, 1.1, 1.2])

    expected = input
    for weights in network.layers:
        expected = weights.matrix_mul(expected)

    assert network.predict(input) == expected
    for value in network.predict(input).as_slice():
        assert value >= 0.0


def test_predict_wrong_number_of_input_rows(rng):
    network = NeuralNetworkBuilder(3).add_hidden_layer(4).add_output_layer(2, rng)

    with pytest.raises(DimensionMismatch):
        network.predict(Matrix(4, 1, 1.0))


def test_predict_too_many_input_columns(rng):
    network = NeuralNetworkBuilder(3).add_hidden_layer(4).add_output_layer(2, rng)

    with pytest.raises(DimensionMismatch):
        network.predict(Matrix(3, 2, 1.0))


def test_network_weights_cannot_be_changed_from_outside(rng):
    network = NeuralNetworkBuilder(2).add_output_layer(1, rng)
    input = Matrix.from_slice(2, 1, [1.0, 2.0])
    before = network.predict(input)

    layer = network.layers[0]
    layer.map_ref_mut(lambda value: value + 100.0)
    layer += 1.0

    assert network.predict(input) == before


def test_predict_many(rng):
    network = NeuralNetworkBuilder(3).add_output_layer(2, rng)
    inputs = [Matrix(3, 1, 1.0), Matrix(3, 1, 2.0)]

    predictions = network.predict_many(inputs, progress=True)
    assert predictions == [network.predict(input) for input in inputs]


def test_predict_many_stops_on_bad_input(rng):
    network = NeuralNetworkBuilder(3).add_output_layer(2, rng)

    with pytest.raises(DimensionMismatch):
        network.predict_many([Matrix(3, 1, 1.0), Matrix(2, 1, 1.0)])


def test_repr(rng):
    network = NeuralNetworkBuilder(3).add_hidden_layer(4).add_output_layer(2, rng)

    assert repr(network) == "NeuralNetwork(layer_sizes=[3, 4, 2])"
