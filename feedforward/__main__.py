import numpy as np

from . import config
from .builder import NeuralNetworkBuilder
from .logging_config import setup_logging
from .matrix import Matrix


def main():
    setup_logging()

    print("----- Matrix -----")
    data = [0.25, 1.33, -0.1, 1.0, -2.73, 1.2]
    matrix = Matrix.from_slice(2, 3, data)
    print(matrix)

    print("----- Transposed -----")
    print(matrix.transpose())

    print("----- Network 3-4-2 -----")
    seed = config.RANDOM_SEED if config.RANDOM_SEED is not None else 42
    rng = np.random.default_rng(seed)
    network = NeuralNetworkBuilder(3).add_hidden_layer(4).add_output_layer(2, rng)
    for i, weights in enumerate(network.layers):
        print(f"Layer {i + 1} weights:")
        print(weights)

    inputs = Matrix.from_slice(3, 1, [1.0, 1.1, 1.2])
    prediction = network.predict(inputs)
    print("Prediction:")
    print(prediction)


if __name__ == "__main__":
    main()
