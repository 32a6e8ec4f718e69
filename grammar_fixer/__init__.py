"""Grammar Fixer: ownership-scoped storage for text correction sessions and issues."""

__version__ = "0.1.0"
