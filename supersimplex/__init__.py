"""Smooth OpenSimplex 2 (SuperSimplex) gradient noise in 2D, 3D and 4D."""

__version__ = "0.1.0"