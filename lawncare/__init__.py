"""Lawn care tracker backend."""
