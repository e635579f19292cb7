"""Nearest-neighbour searches, close-pair detection and related spatial kernels for point patterns."""

__version__ = "0.1.0"