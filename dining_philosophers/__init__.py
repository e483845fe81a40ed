"""A threaded simulation of the dining philosophers problem."""

__version__ = "1.0.0"
__all__ = ["args", "cli", "simulation", "timing"]