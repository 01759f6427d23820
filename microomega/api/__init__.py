"""HTTP surface of the simulation core."""
