"""Interactive Pythagoras tree fractal."""
__version__ = "0.1.0"
