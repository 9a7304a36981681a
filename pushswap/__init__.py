"""Sort integers with two stacks and a limited set of operations, listing the moves."""

__version__ = "1.0.0"
__all__ = ["cheapest", "cli", "parsing", "sorting", "stack"]