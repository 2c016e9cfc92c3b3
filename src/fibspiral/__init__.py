"""Animated Fibonacci spiral rendered with pygame."""

__version__ = "0.1.0"
