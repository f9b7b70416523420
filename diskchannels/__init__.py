"""Unit disk graphs, load generation and channel-allocation performance modelling."""

__version__ = "0.1.0"
__all__ = ["cli", "generator", "graph", "performance", "rhos", "utils"]