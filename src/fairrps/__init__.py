"""Provably fair N-move Rock-Paper-Scissors."""

__version__ = "0.1.0"
