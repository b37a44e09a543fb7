"""A two-player paddle-and-ball arcade game with display-independent rules."""

__version__ = "0.1.0"
__all__ = ["__version__"]