"""Terrain meshes, noise height functions, Poisson-disc placement and transforms."""

__version__ = "0.1.0"