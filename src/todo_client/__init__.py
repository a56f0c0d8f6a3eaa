"""Console client for a REST todo-list service."""

__version__ = "0.1.0"
