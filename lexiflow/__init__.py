"""Lexiflow vocabulary-learning backend."""
