"""Boundary adapters: persistence."""
