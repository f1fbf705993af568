"""Chess board, small neural network, network bot and self-play game simulations."""

__version__ = "0.1.0"
__all__ = ["board", "bot", "matrix", "network", "simulate"]