"""Lawn profile module: care profile, fertilizer and wages."""
