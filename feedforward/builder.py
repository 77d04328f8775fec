import logging

import numpy as np

from . import config
from .errors import BuilderFinalized
from .matrix import Matrix, _check_dimension
from .neural_network import NeuralNetwork

logger = logging.getLogger(__name__)


class NeuralNetworkBuilder:
    """
    Collects layer sizes and creates a `NeuralNetwork` with random weights.

        network = (
            NeuralNetworkBuilder(3)
            .add_hidden_layer(4)
            .add_output_layer(2)
        )

    `add_output_layer` finishes the builder; it cannot be used afterwards.
    """

    def __init__(self, input_size):
        self.input_size = _check_dimension(input_size, "input_size")
        self.hidden_layer_sizes = []
        self._finalized = False

    def _ensure_building(self):
        if self._finalized:
            raise BuilderFinalized()

    def add_hidden_layer(self, nodes):
        self._ensure_building()
        self.hidden_layer_sizes.append(_check_dimension(nodes, "nodes"))
        return self

    def add_output_layer(self, nodes, rng=None):
        """
        Add the output layer and create the network.

        One weight matrix `destination x source` is drawn per pair of
        consecutive layer sizes, using `rng` (see `Matrix.from_random`).
        Raises DimensionsTooLarge if a weight matrix would be too large; the
        builder stays usable in that case.
        """
        self._ensure_building()
        sizes = [self.input_size, *self.hidden_layer_sizes, _check_dimension(nodes, "nodes")]
        # Share one generator between all layers so a seed covers the network.
        if rng is None:
            rng = np.random.default_rng(config.RANDOM_SEED)

        layers = [
            Matrix.from_random(destination, source, rng)
            for source, destination in zip(sizes[:-1], sizes[1:])
        ]

        network = NeuralNetwork(layers)
        self._finalized = True
        logger.debug("Built neural network with layer sizes %s", sizes)
        return network
