"""Classic data structures and algorithms, and a multi-criteria travel route planner."""

__version__ = "0.1.0"