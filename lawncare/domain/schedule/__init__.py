"""Schedule module: care tasks and their recommendations."""
