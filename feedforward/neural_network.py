import logging

from tqdm import tqdm

from .errors import DimensionMismatch, EmptyNetwork

logger = logging.getLogger(__name__)


class NeuralNetwork:
    """
    A feed-forward network made of one weight matrix per layer.

    Weight matrix `i` is `o x n` where `n` is the number of nodes feeding into
    the layer and `o` the number of nodes it produces. Prediction is the chain
    of matrix products through all weight matrices, without activation or
    bias.

    Use `NeuralNetworkBuilder` to create a network with random weights.
    """

    def __init__(self, layers):
        layers = tuple(layers)
        if not layers:
            raise EmptyNetwork()

        for i in range(len(layers) - 1):
            produced = layers[i].get_number_of_rows()
            expected = layers[i + 1].get_number_of_columns()
            if produced != expected:
                raise DimensionMismatch(
                    expected,
                    produced,
                    f"Layer {i} produces {produced} nodes but layer {i + 1} "
                    f"expects {expected}.",
                )

        self._layers = tuple(layer.copy() for layer in layers)
        logger.debug(
            "Created neural network with layer sizes %s", self.get_layer_sizes()
        )

    @property
    def layers(self):
        return tuple(layer.copy() for layer in self._layers)

    def __len__(self):
        return len(self._layers)

    def get_number_of_inputs(self):
        return self._layers[0].get_number_of_columns()

    def get_number_of_outputs(self):
        return self._layers[-1].get_number_of_rows()

    def get_layer_sizes(self):
        return [self.get_number_of_inputs()] + [
            layer.get_number_of_rows() for layer in self._layers
        ]

    def predict(self, inputs):
        """
        Let the network predict an output for the given inputs.

        The inputs must be an `i x 1` column vector where `i` is the number of
        input nodes, otherwise DimensionMismatch is raised. The output is an
        `o x 1` column vector.
        """
        expected = (self.get_number_of_inputs(), 1)
        if inputs.shape != expected:
            raise DimensionMismatch(
                expected,
                inputs.shape,
                f"Expected a {expected[0]}x1 input, got "
                f"{inputs.shape[0]}x{inputs.shape[1]}.",
            )

        output = inputs
        for weights in self._layers:
            output = weights.matrix_mul(output)

        return output

    def predict_many(self, batch, progress=False):
        predictions = []
        for inputs in tqdm(batch, desc="Predicting", unit="input", disable=not progress):
            predictions.append(self.predict(inputs))

        logger.debug("Predicted %d inputs", len(predictions))
        return predictions

    def __repr__(self):
        return f"NeuralNetwork(layer_sizes={self.get_layer_sizes()})"
