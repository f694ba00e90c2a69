"""Classic algorithm exercises on arrays, linked lists, matrices, strings, stacks and trees."""

__version__ = "0.1.0"