"""A gravity-flipping platformer with connected rooms, hazards and a map."""

__version__ = "0.1.0"
__all__ = ["__version__"]