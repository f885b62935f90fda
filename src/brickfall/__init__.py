"""brickfall: a falling-block puzzle engine with pygame and gymnasium drivers."""

__version__ = "0.1.0"
