"""A dense matrix type and a feed-forward neural network built on it."""

from .builder import NeuralNetworkBuilder
from .errors import (
    BuilderFinalized,
    CellOutOfBounds,
    DimensionMismatch,
    DimensionsTooLarge,
    EmptyNetwork,
    NetworkError,
)
from .matrix import Matrix
from .neural_network import NeuralNetwork

__version__ = "0.1.0"

__all__ = [
    "BuilderFinalized",
    "CellOutOfBounds",
    "DimensionMismatch",
    "DimensionsTooLarge",
    "EmptyNetwork",
    "Matrix",
    "NetworkError",
    "NeuralNetwork",
    "NeuralNetworkBuilder",
]
