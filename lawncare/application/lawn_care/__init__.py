"""Lawn care application module."""
