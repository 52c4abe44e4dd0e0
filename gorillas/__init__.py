"""A two-player artillery game played over a city skyline, with its rules usable without a window."""

__version__ = "0.1.0"
__all__ = ["__version__"]