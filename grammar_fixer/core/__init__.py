"""Domain primitives: failure taxonomy and caller identity."""
