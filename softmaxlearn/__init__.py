"""Softmax regression with gradient-based training, preprocessing helpers and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "dataset", "preprocessing", "softmax", "weights"]