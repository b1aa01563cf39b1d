"""Sort integers with two stacks and a limited instruction set, and check instruction sequences."""

__version__ = "1.0.0"
__all__ = ["checker", "cli", "parsing", "solver", "stack"]