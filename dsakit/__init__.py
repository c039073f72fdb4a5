"""Classic data-structure and algorithm exercises: hashing, maths, recursion, a bounded stack and text."""

__version__ = "0.1.0"
__all__ = ["hashing", "maths", "recursion", "stack", "text"]