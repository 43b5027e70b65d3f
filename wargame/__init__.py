"""War card game simulation."""
