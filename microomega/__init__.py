"""Deterministic simulation core for the Micro-Omega organism-evolution game."""

__version__ = "0.1.0"
