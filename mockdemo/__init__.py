"""Worked examples of interfaces and test doubles: summing, a human and a chicken, and user registration."""

__version__ = "0.1.0"
__all__ = ["__version__"]