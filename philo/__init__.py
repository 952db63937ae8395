"""Dining philosophers simulation with one thread per thinker and a monitor."""

__version__ = "1.0.0"
__all__ = ["__version__"]