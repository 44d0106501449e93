"""Structural measurements of single trees derived from skeleton graphs and branch meshes."""

__version__ = "1.0.0"
